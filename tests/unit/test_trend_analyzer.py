"""
Unit tests for industry trend analysis.

Run: pytest tests/unit/test_trend_analyzer.py -v
"""

from pathwise.career.trend_analyzer import analyze_industry_trends
from pathwise.core.reference_data import DEFAULT_REFERENCE


class TestAnalyzeIndustryTrends:
    def test_skill_gap(self):
        report = analyze_industry_trends(["Python", "jQuery", "React"])
        gap = report.skill_gap_analysis

        assert gap.missing == ["TypeScript", "Kubernetes", "Machine Learning"]
        assert gap.outdated == ["jQuery"]
        assert gap.strong == ["Python", "React"]

    def test_recommendations(self):
        report = analyze_industry_trends(["Python", "jQuery", "React"])
        assert "Learn TypeScript" in report.recommendations
        assert "Plan a migration away from jQuery" in report.recommendations

    def test_matching_is_case_insensitive(self):
        gap = analyze_industry_trends(["python", "JQUERY"]).skill_gap_analysis
        assert gap.strong == ["python"]
        assert gap.outdated == ["JQUERY"]

    def test_no_skills(self):
        report = analyze_industry_trends([])
        assert len(report.skill_gap_analysis.missing) == len(DEFAULT_REFERENCE.trending_skills)
        assert report.skill_gap_analysis.outdated == []
        assert report.skill_gap_analysis.strong == []

    def test_tables_passed_through(self):
        data = analyze_industry_trends(None).to_dict()
        assert data["declining_skills"] == list(DEFAULT_REFERENCE.declining_skills)
        assert data["emerging_opportunities"] == list(DEFAULT_REFERENCE.emerging_opportunities)
        assert data["trending_skills"][0]["skill"] == "TypeScript"
