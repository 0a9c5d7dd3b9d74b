"""
Setup script for pathwise-engine.

Pathwise is a learner modeling and recommendation engine. It keeps a
per-learner profile and turns it, together with session history, into:

1. Insights and personalized recommendations
2. Adaptive difficulty and multi-week learning paths
3. Outcome predictions, achievements and career guidance

The 'pathwise' command is the CLI entry point; the HTTP API runs under
uvicorn via 'pathwise serve' or main.py.
"""

from setuptools import find_packages, setup

setup(
    name="pathwise-engine",
    version="0.1.0",
    description="Learner modeling and recommendation engine",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="Pathwise",
    packages=find_packages(include=["pathwise", "pathwise.*"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # API
        "fastapi>=0.100.0",
        "uvicorn>=0.23.0",
        # HTTP (FastAPI TestClient transport)
        "httpx>=0.25.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pathwise=pathwise.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="learning adaptive recommendations education career",
)
