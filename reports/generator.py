"""Генератор текстовых и визуальных отчетов"""
from typing import Any, List, Optional
from PIL import Image, ImageDraw, ImageFont
import io
import os
import logging

from numerology.models import NumerologyResult
from reading.models import ReadingReport, Subject

logger = logging.getLogger(__name__)

SEPARATOR = "━" * 40

# Расположение цифр в квадрате Ло Шу (生命靈數九宮格)
GRID_LAYOUT = (
    (3, 6, 9),
    (2, 5, 8),
    (1, 4, 7),
)

FONT_PATHS = [
    "/usr/share/fonts/opentype/noto/NotoSansCJK-Bold.ttc",  # Linux, с иероглифами
    "/System/Library/Fonts/PingFang.ttc",  # macOS
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",  # Linux
    "C:/Windows/Fonts/msjh.ttc",  # Windows
]


class ReportGenerator:
    """Генератор текстовых и визуальных отчетов по прочтению"""

    def generate_text_report(self, subject: Subject, report: ReadingReport,
                             partner: Optional[Subject] = None) -> str:
        """Генерирует текстовый отчет"""
        personal = report.personal
        numerology = personal.get('numerology') or {}
        name_grid = personal.get('nameGrid') or {}
        grids = name_grid.get('fiveGrids') or {}

        text = f"""
╔════════════════════════════════════════╗
║     AETHERIS 命理報告                  ║
╚════════════════════════════════════════╝

👤 姓名: {subject.name}
📅 生日: {subject.birthday}

{SEPARATOR}

🔢 生命靈數: {numerology.get('lifeNum', '')}
{self._format_grid(numerology.get('grid') or [0] * 10)}
連線: {'、'.join(numerology.get('lines') or []) or '無'}
{self._text(numerology.get('analysis'))}

{SEPARATOR}

✍️ 姓名五格 (總筆劃 {name_grid.get('strokes', '')}):

• 天格: {grids.get('heaven', '')}
• 人格: {grids.get('man', '')}
• 地格: {grids.get('earth', '')}
• 外格: {grids.get('out', '')}
• 總格: {grids.get('total', '')} ({name_grid.get('luck81', '')})
• 三才: {name_grid.get('threeTalents', '')}
{self._text(name_grid.get('analysis'))}
"""

        for title, key in (('☯️ 八字', 'bazi'), ('🧬 人類圖', 'humanDesign'), ('🌀 卓爾金曆', 'tzolkin')):
            section = self._text(personal.get(key))
            if section:
                text += f"\n{SEPARATOR}\n\n{title}:\n{section}\n"

        if report.relationship:
            text += f"\n{SEPARATOR}\n\n💞 雙人合盤"
            if partner is not None:
                text += f" ({subject.name} × {partner.name})"
            text += ":\n"
            sync = report.relationship.get('syncScore')
            if sync is not None:
                text += f"契合度: {sync}%\n"
            for key in ('harmony', 'advice'):
                value = self._text(report.relationship.get(key))
                if value:
                    text += f"{value}\n"

        advice = self._text(report.dailyAdvice)
        if advice:
            text += f"\n{SEPARATOR}\n\n🌞 今日指引:\n{advice}\n"

        lucky = self._text(report.luckyIndicators)
        if lucky:
            text += f"\n🍀 幸運指標:\n{lucky}\n"

        text += f"\n{SEPARATOR}\n"
        return text

    def _format_grid(self, grid: List[int]) -> str:
        """Квадрат Ло Шу текстом: цифра повторяется столько раз, сколько встречается"""
        rows = []
        for row in GRID_LAYOUT:
            cells = [(str(d) * grid[d]).center(5) if grid[d] else '  ·  ' for d in row]
            rows.append('|'.join(cells))
        return '\n'.join(rows)

    def _text(self, value: Any) -> str:
        """Приводит текст модели к строке"""
        if value is None:
            return ''
        if isinstance(value, dict):
            return '\n'.join(f"{k}: {self._text(v)}" for k, v in value.items() if self._text(v))
        if isinstance(value, list):
            return '、'.join(self._text(v) for v in value if self._text(v))
        return str(value).strip()

    def _load_font(self, size: int):
        """Пытается найти подходящий шрифт"""
        for path in FONT_PATHS:
            if os.path.exists(path):
                try:
                    return ImageFont.truetype(path, size)
                except OSError:
                    continue
        logger.debug("Шрифт не найден, используется стандартный")
        return ImageFont.load_default()

    def generate_visual_grid(self, result: NumerologyResult) -> bytes:
        """Генерирует PNG квадрата Ло Шу"""
        img_size = 600
        cell_size = img_size // 3
        border_width = 3
        label_height = 40 + 30 * max(len(result.lines), 1)

        border_color = (0, 0, 0)
        filled_color = (255, 215, 0)  # Золотой для заполненных ячеек

        img = Image.new('RGB', (img_size, img_size + label_height), color='white')
        draw = ImageDraw.Draw(img)
        font = self._load_font(56)
        label_font = self._load_font(20)

        for row_index, row in enumerate(GRID_LAYOUT):
            for col_index, digit in enumerate(row):
                x0 = col_index * cell_size
                y0 = row_index * cell_size
                count = result.grid[digit]

                if count:
                    margin = 10
                    draw.rectangle(
                        [x0 + margin, y0 + margin, x0 + cell_size - margin, y0 + cell_size - margin],
                        fill=filled_color, outline=border_color, width=2
                    )

                label = str(digit) * count if count else ''
                if label:
                    bbox = draw.textbbox((0, 0), label, font=font)
                    text_width = bbox[2] - bbox[0]
                    text_height = bbox[3] - bbox[1]
                    draw.text(
                        (x0 + (cell_size - text_width) // 2, y0 + (cell_size - text_height) // 2),
                        label,
                        fill=(0, 0, 0),
                        font=font
                    )

        # Сетка
        for i in range(4):
            pos = min(i * cell_size, img_size - border_width)
            draw.rectangle([pos, 0, pos + border_width, img_size], fill=border_color)
            draw.rectangle([0, pos, img_size, pos + border_width], fill=border_color)

        captions = [f"Life path: {result.life_path_number}"] + list(result.lines)
        for i, caption in enumerate(captions):
            draw.text((20, img_size + 10 + 30 * i), caption, fill=(0, 0, 0), font=label_font)

        img_bytes = io.BytesIO()
        img.save(img_bytes, format='PNG')
        return img_bytes.getvalue()

