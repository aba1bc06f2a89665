"""PDF鑑定書の生成"""
from io import BytesIO
from typing import Any, Dict, List
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from divination.models import DivinationInput

from .generator import DIVINATION_TITLES, FIELD_LABELS, _as_dict

JAPANESE_FONT = 'HeiseiKakuGo-W5'

GENDER_LABELS = {'male': '男性', 'female': '女性'}


def _register_font():
    if JAPANESE_FONT not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(UnicodeCIDFont(JAPANESE_FONT))


class PDFGenerator:
    """PDF鑑定書のジェネレーター"""

    def __init__(self):
        _register_font()
        self.styles = getSampleStyleSheet()
        self._setup_styles()

    def _setup_styles(self):
        self.styles.add(ParagraphStyle(
            name='JapaneseTitle',
            parent=self.styles['Heading1'],
            fontName=JAPANESE_FONT,
            fontSize=24,
            textColor=colors.HexColor('#2C3E50'),
            spaceAfter=30,
            alignment=TA_CENTER,
        ))
        self.styles.add(ParagraphStyle(
            name='JapaneseHeading',
            parent=self.styles['Heading2'],
            fontName=JAPANESE_FONT,
            fontSize=16,
            textColor=colors.HexColor('#34495E'),
            spaceAfter=12,
            spaceBefore=12,
        ))
        self.styles.add(ParagraphStyle(
            name='JapaneseBody',
            parent=self.styles['Normal'],
            fontName=JAPANESE_FONT,
            fontSize=11,
            leading=18,
            textColor=colors.HexColor('#2C3E50'),
            alignment=TA_JUSTIFY,
            spaceAfter=6,
            wordWrap='CJK',
        ))

    def _paragraph(self, text: str, style: str = 'JapaneseBody') -> Paragraph:
        return Paragraph(escape(str(text)), self.styles[style])

    def generate_pdf(self, data: DivinationInput, divination_type: str, result: Any) -> bytes:
        result = _as_dict(result)
        buffer = BytesIO()
        doc = SimpleDocTemplate(buffer, pagesize=A4)
        story = []

        title = DIVINATION_TITLES.get(divination_type, divination_type)
        story.append(self._paragraph(f"{title} 鑑定書", 'JapaneseTitle'))
        story.append(Spacer(1, 10 * mm))

        birth = data.birth_datetime()
        client_rows = [
            ['お名前', data.full_name or '（未入力）'],
            ['生年月日', birth.strftime('%Y年%m月%d日') if birth else '（不明）'],
        ]
        if data.gender in GENDER_LABELS:
            client_rows.append(['性別', GENDER_LABELS[data.gender]])
        if data.question:
            client_rows.append(['ご質問', data.question])
        story.append(self._table(client_rows))
        story.append(Spacer(1, 10 * mm))

        story.append(self._paragraph('鑑定の核心', 'JapaneseHeading'))
        story.append(self._paragraph(result.get('core_meaning', '')))
        story.append(Spacer(1, 5 * mm))

        highlight_rows = [
            [label, str(result[key])] for key, label in FIELD_LABELS.items()
            if result.get(key) not in (None, '')
        ]
        if highlight_rows:
            story.append(self._paragraph('主な結果', 'JapaneseHeading'))
            story.append(self._table([['項目', '内容']] + highlight_rows, header=True))
            story.append(Spacer(1, 10 * mm))

        if divination_type == 'numerology' and result.get('matrix'):
            story.append(self._paragraph('数秘マトリクス', 'JapaneseHeading'))
            story.append(self._matrix_table(result['matrix']))
            story.append(Spacer(1, 10 * mm))

        guidance = result.get('guidance') or result.get('personalized_guidance') or result.get('personal_message')
        if guidance:
            story.append(self._paragraph('メッセージ', 'JapaneseHeading'))
            story.append(self._paragraph(' '.join(str(guidance).split())))

        story.append(Spacer(1, 20 * mm))
        story.append(self._paragraph('この鑑定書は自動生成されました'))

        doc.build(story)
        buffer.seek(0)
        return buffer.getvalue()

    def _table(self, rows: List[List[str]], header: bool = False) -> Table:
        cells = [[self._paragraph(cell) for cell in row] for row in rows]
        table = Table(cells, colWidths=[50 * mm, 120 * mm])
        style = [
            ('FONTNAME', (0, 0), (-1, -1), JAPANESE_FONT),
            ('GRID', (0, 0), (-1, -1), 1, colors.black),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('ROWBACKGROUNDS', (0, 0), (-1, -1), [colors.white, colors.HexColor('#ECF0F1')]),
        ]
        if header:
            style.append(('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#3498DB')))
        table.setStyle(TableStyle(style))
        return table

    @staticmethod
    def _matrix_table(matrix: Dict[str, int]) -> Table:
        rows = [
            [str(matrix['top_left']), str(matrix['top_center']), str(matrix['top_right'])],
            [str(matrix['middle_left']), str(matrix['center']), str(matrix['middle_right'])],
            [str(matrix['bottom_left']), str(matrix['bottom_center']), str(matrix['bottom_right'])],
        ]
        table = Table(rows, colWidths=[40 * mm, 40 * mm, 40 * mm])
        table.setStyle(TableStyle([
            ('ALIGN', (0, 0), (-1, -1), 'CENTER'),
            ('FONTNAME', (0, 0), (-1, -1), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 20),
            ('GRID', (0, 0), (-1, -1), 2, colors.black),
            ('BACKGROUND', (1, 1), (1, 1), colors.HexColor('#F39C12')),
            ('TEXTCOLOR', (1, 1), (1, 1), colors.white),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('TOPPADDING', (0, 0), (-1, -1), 15),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 15),
        ]))
        return table


def generate_pdf_report(data: DivinationInput, divination_type: str, result: Any) -> bytes:
    """PDF生成のショートカット"""
    generator = PDFGenerator()
    return generator.generate_pdf(data, divination_type, result)
