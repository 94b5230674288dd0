"""ReportGenerator: текстовый отчет и PNG квадрата"""
import io

import pytest
from PIL import Image

from numerology import NumerologyCalculator
from reading import ReadingReport, Subject
from reports import ReportGenerator

SUBJECT = Subject(name="張毅", birthday="1992-08-15")


@pytest.fixture
def generator():
    return ReportGenerator()


def make_report(**overrides):
    fields = dict(
        personal={
            "numerology": {"lifeNum": 8, "grid": [0, 2, 1, 0, 0, 1, 0, 0, 1, 2], "lines": ["感情線", "事業線"]},
            "nameGrid": {
                "strokes": 26,
                "fiveGrids": {"heaven": 12, "man": 26, "earth": 15, "out": 16, "total": 52},
                "luck81": "吉",
                "threeTalents": "木土土",
            },
            "bazi": None,
            "humanDesign": {"type": "生產者"},
            "tzolkin": None,
        },
        dailyAdvice="今日宜靜",
    )
    fields.update(overrides)
    return ReadingReport(**fields)


class TestTextReport:
    def test_personal_sections(self, generator):
        text = generator.generate_text_report(SUBJECT, make_report())

        assert "姓名: 張毅" in text
        assert "生命靈數: 8" in text
        assert "連線: 感情線、事業線" in text
        assert "天格: 12" in text
        assert "三才: 木土土" in text
        assert "type: 生產者" in text
        assert "今日宜靜" in text
        # Пустые разделы не выводятся
        assert "八字" not in text
        assert "雙人合盤" not in text

    def test_grid_rows(self, generator):
        grid = generator._format_grid([0, 2, 1, 0, 0, 1, 0, 0, 1, 2])
        rows = [[cell.strip() for cell in row.split('|')] for row in grid.split('\n')]
        # Ряды 3-6-9, 2-5-8, 1-4-7
        assert rows == [["·", "·", "99"], ["2", "5", "8"], ["11", "·", "·"]]

    def test_relationship(self, generator):
        report = make_report(relationship={"syncScore": 72, "advice": "多溝通"})
        partner = Subject(name="陳雅", birthday="1994-03-29")

        text = generator.generate_text_report(SUBJECT, report, partner)

        assert "雙人合盤 (張毅 × 陳雅)" in text
        assert "契合度: 72%" in text
        assert "多溝通" in text

    def test_lucky_indicators(self, generator):
        report = make_report(luckyIndicators={"color": "金", "number": "8"})
        text = generator.generate_text_report(SUBJECT, report)
        assert "color: 金" in text


class TestVisualGrid:
    def test_png_image(self, generator):
        result = NumerologyCalculator().calculate("1992-08-15")

        data = generator.generate_visual_grid(result)

        image = Image.open(io.BytesIO(data))
        assert image.format == "PNG"
        assert image.width == 600
        assert image.height > 600

    def test_empty_grid(self, generator):
        result = NumerologyCalculator().calculate("")
        assert generator.generate_visual_grid(result).startswith(b"\x89PNG")
