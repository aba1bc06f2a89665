"""鑑定書（テキスト・画像）の生成"""
import io
import logging
import os
from typing import Any, Dict, List

from PIL import Image, ImageDraw, ImageFont
from pydantic import BaseModel

from divination.models import DivinationInput

logger = logging.getLogger(__name__)

DIVINATION_TITLES = {
    'tarot': 'タロット占い',
    'iching': '易経',
    'runes': 'ルーン占い',
    'celtic': 'オガム占い',
    'kabbalah': 'カバラ数秘',
    'mayan': 'マヤ暦',
    'numerology': '数秘術',
    'nine-star-ki': '九星気学',
    'chakra': 'チャクラ診断',
    'feng-shui': '風水',
    'aura-soma': 'オーラソーマ',
    'akashic': 'アカシックレコード',
    'astrology': '西洋占星術',
    'shichu-suimei': '四柱推命',
}

# テキスト鑑定書に載せる項目名
FIELD_LABELS = {
    'kua_number': '本命卦',
    'group': 'グループ',
    'soul_color': '魂の色',
    'dominant_chakra': '最も活発なチャクラ',
    'focus_chakra': '注目すべきチャクラ',
    'life_path_number': 'ライフパスナンバー',
    'soul_mission': '魂の使命',
    'soul_origin': '魂の起源',
    'dominant_element': '優勢なエレメント',
    'daily_color': '今日の色',
    'tikkun': '魂の修正課題',
    'affirmation': 'アファメーション',
    'period': '運',
    'annual_center_star': '年盤の中宮星',
}

SEPARATOR = '━' * 40

FONT_PATHS = [
    '/usr/share/fonts/opentype/noto/NotoSansCJK-Bold.ttc',  # Linux（日本語）
    '/System/Library/Fonts/Hiragino Sans GB.ttc',  # macOS
    '/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf',  # Linux
    'C:/Windows/Fonts/msgothic.ttc',  # Windows
]

LINE_COLOR = (44, 62, 80)
CHANGING_COLOR = (192, 57, 43)
CENTER_COLOR = (255, 215, 0)


def _as_dict(result: Any) -> Dict:
    if isinstance(result, BaseModel):
        return result.model_dump()
    return result or {}


def _load_font(size: int):
    for path in FONT_PATHS:
        if os.path.exists(path):
            try:
                return ImageFont.truetype(path, size)
            except OSError:
                logger.warning(f"フォントを読み込めません: {path}")
    return ImageFont.load_default()


def _to_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format='PNG')
    return buffer.getvalue()


class ReportGenerator:
    """テキストと画像の鑑定書を作る"""

    def generate_text_report(self, data: DivinationInput, divination_type: str, result: Any,
                             three_layer: Any = None) -> str:
        result = _as_dict(result)
        title = DIVINATION_TITLES.get(divination_type, divination_type)
        birth = data.birth_datetime()
        report = f"""
╔════════════════════════════════════════╗
║     {title}　鑑定書
╚════════════════════════════════════════╝

👤 お名前: {data.full_name or '（未入力）'}
📅 生年月日: {birth.strftime('%Y年%m月%d日') if birth else '（不明）'}
"""
        if data.question:
            report += f"❓ ご質問: {data.question}\n"

        report += f"\n{SEPARATOR}\n\n🔮 鑑定の核心:\n\n{result.get('core_meaning', '')}\n"

        highlights = self._format_highlights(result)
        if highlights:
            report += f"\n{SEPARATOR}\n\n📊 主な結果:\n\n{highlights}"

        figure = self._format_figure(divination_type, result)
        if figure:
            report += f"\n{SEPARATOR}\n\n{figure}"

        guidance = result.get('guidance') or result.get('personalized_guidance') or result.get('personal_message')
        if guidance:
            report += f"\n{SEPARATOR}\n\n💫 メッセージ:\n\n{guidance}\n"

        if three_layer:
            report += f"\n{SEPARATOR}\n\n{self._format_three_layer(_as_dict(three_layer))}"

        report += f"\n{SEPARATOR}\n"
        report += "✨ この鑑定書は自動生成されました\n"
        return report

    @staticmethod
    def _format_highlights(result: Dict) -> str:
        text = ''
        for key, label in FIELD_LABELS.items():
            value = result.get(key)
            if value not in (None, ''):
                text += f"• {label}: {value}\n"
        return text

    def _format_figure(self, divination_type: str, result: Dict) -> str:
        if divination_type == 'iching' and result.get('lines'):
            return self._format_hexagram(result)
        if divination_type == 'numerology' and result.get('matrix'):
            return self._format_matrix(result)
        if divination_type == 'tarot' and result.get('positions'):
            return self._format_cards(result['positions'])
        return ''

    @staticmethod
    def _format_hexagram(result: Dict) -> str:
        primary = result['primary_hexagram']
        text = f"☯️ 本卦: 第{primary['number']}卦 {primary['name']}\n\n"
        # 上爻から順に描く
        for line in reversed(result['lines']):
            bar = '━━━━━━━━━' if line['value'] in (7, 9) else '━━━　━━━'
            mark = '  ←変爻' if line['changing'] else ''
            text += f"    {bar}{mark}\n"
        changing = result.get('changing_hexagram')
        if changing:
            text += f"\n之卦: 第{changing['number']}卦 {changing['name']}\n"
        return text

    @staticmethod
    def _format_matrix(result: Dict) -> str:
        matrix = result['matrix']
        karmic = result.get('karmic_numbers') or []
        return f"""🎯 数秘マトリクス:

        {matrix['top_left']}  |  {matrix['top_center']}  |  {matrix['top_right']}
      ─────┼─────┼─────
        {matrix['middle_left']}  |  {matrix['center']}  |  {matrix['middle_right']}
      ─────┼─────┼─────
        {matrix['bottom_left']}  |  {matrix['bottom_center']}  |  {matrix['bottom_right']}

⚠️ カルミックナンバー: {', '.join(map(str, karmic)) if karmic else 'なし'}
"""

    @staticmethod
    def _format_cards(positions: List[Dict]) -> str:
        text = '🃏 カード:\n\n'
        for card in positions:
            orientation = '逆位置' if card.get('is_reversed') else '正位置'
            name = card.get('card', {}).get('name', '')
            text += f"• {card.get('position', '')}: {name}（{orientation}）\n"
        return text

    @staticmethod
    def _format_three_layer(three_layer: Dict) -> str:
        classical = three_layer.get('classical', {})
        modern = three_layer.get('modern', {})
        practical = three_layer.get('practical', {})
        text = '📖 3層解釈:\n\n'
        text += f"【古典】{classical.get('interpretation', '')}\n\n"
        text += f"【現代】{modern.get('psychological_perspective', '')}\n\n"
        text += f"【実践】{practical.get('daily_guidance', '')}\n"
        for item in practical.get('action_items', []):
            text += f"  • {item}\n"
        return text

    def generate_hexagram_image(self, iching_result: Any) -> bytes:
        """卦の六爻を描いたPNG（陽爻は一本、陰爻は中央が切れた棒、変爻は赤）"""
        result = _as_dict(iching_result)
        width, line_height, margin = 400, 50, 40
        label_height = 50
        height = margin * 2 + line_height * 6 + label_height
        image = Image.new('RGB', (width, height), color='white')
        draw = ImageDraw.Draw(image)

        bar_height = 24
        gap = 40
        left, right = margin, width - margin
        for row, line in enumerate(reversed(result.get('lines', []))):
            top = margin + row * line_height
            color = CHANGING_COLOR if line['changing'] else LINE_COLOR
            if line['value'] in (7, 9):
                draw.rectangle([left, top, right, top + bar_height], fill=color)
            else:
                middle = width // 2
                draw.rectangle([left, top, middle - gap // 2, top + bar_height], fill=color)
                draw.rectangle([middle + gap // 2, top, right, top + bar_height], fill=color)

        primary = result.get('primary_hexagram') or {}
        label = f"No.{primary.get('number', '')} {primary.get('chinese_name', '')}"
        font = _load_font(24)
        bbox = draw.textbbox((0, 0), label, font=font)
        draw.text(((width - (bbox[2] - bbox[0])) // 2, height - label_height), label,
                  fill=(0, 0, 0), font=font)
        return _to_png(image)

    def generate_visual_matrix(self, numerology_result: Any) -> bytes:
        """数秘マトリクス（3×3）のPNG"""
        matrix = _as_dict(numerology_result)['matrix']
        img_size = 600
        cell_size = img_size // 3
        border_width = 3
        image = Image.new('RGB', (img_size, img_size), color='white')
        draw = ImageDraw.Draw(image)

        for i in range(4):
            offset = i * cell_size
            draw.rectangle([offset, 0, offset + border_width, img_size], fill=(0, 0, 0))
            draw.rectangle([0, offset, img_size, offset + border_width], fill=(0, 0, 0))

        positions = {
            'top_left': (0, 0), 'top_center': (1, 0), 'top_right': (2, 0),
            'middle_left': (0, 1), 'center': (1, 1), 'middle_right': (2, 1),
            'bottom_left': (0, 2), 'bottom_center': (1, 2), 'bottom_right': (2, 2),
        }
        font = _load_font(60)
        for key, (col, row) in positions.items():
            if key == 'center':
                margin = 10
                draw.rectangle(
                    [col * cell_size + margin, row * cell_size + margin,
                     (col + 1) * cell_size - margin, (row + 1) * cell_size - margin],
                    fill=CENTER_COLOR, outline=(0, 0, 0), width=2,
                )
            number = str(matrix[key])
            bbox = draw.textbbox((0, 0), number, font=font)
            x = col * cell_size + cell_size // 2 - (bbox[2] - bbox[0]) // 2
            y = row * cell_size + cell_size // 2 - (bbox[3] - bbox[1]) // 2
            draw.text((x, y), number, fill=(0, 0, 0), font=font)
        return _to_png(image)
