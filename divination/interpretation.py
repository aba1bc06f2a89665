"""テーブル駆動の解釈文の組み立て"""
from typing import Dict, Optional, Sequence

from .data.tarot_cards import TAROT_MESSAGES

# 質問カテゴリ → メッセージのキー
CATEGORY_KEYS = {
    '恋愛・結婚': 'love',
    '仕事・転職': 'career',
    '健康': 'health',
    '金運・財運': 'finance',
    '人間関係': 'general',
    '総合運': 'general',
}

# カードの meanings にはhealth/financeがないので近いものに寄せる
MEANING_KEYS = {
    'love': 'love',
    'career': 'career',
    'finance': 'career',
    'health': 'general',
    'spiritual': 'spirituality',
    'general': 'general',
}

# スプレッドの位置名 → メッセージのキー
POSITION_KEYS = {
    '過去': 'past',
    '近い過去': 'past',
    '遠い過去/根本原因': 'past',
    '現在': 'present',
    '現在の状況': 'present',
    '関係の現状': 'present',
    '未来': 'future',
    '近い未来': 'future',
    '可能な未来': 'future',
    '関係の未来': 'future',
    '最終結果': 'outcome',
    '直面する課題': 'obstacle',
    '課題': 'obstacle',
    'あなたの立場': 'inner_self',
    'あなたの気持ち': 'inner_self',
    '外部からの影響': 'environment',
    '外部要因': 'environment',
    '希望と恐れ': 'hopes',
    'アドバイス': 'advice',
    '最善の道': 'advice',
}

TIME_OF_DAY_KEYS = ('morning', 'afternoon', 'evening')


def pick(messages: Optional[Sequence[str]], seed: int) -> str:
    """シードで配列から一つ選ぶ（空なら空文字）"""
    if not messages:
        return ''
    return messages[abs(seed) % len(messages)]


def fallback_text(position: str, symbol: Dict) -> str:
    return f"{position}における{symbol.get('name', '')}の意味"


def interpret(symbol: Dict, position: str, category: Optional[str] = None,
              time_of_day: Optional[str] = None, seed: int = 0,
              is_reversed: bool = False, messages: Optional[Dict] = None) -> str:
    """一般的な意味・位置・カテゴリ・時間帯の文を連結して解釈文を作る"""
    if messages is None:
        messages = TAROT_MESSAGES.get(symbol.get('id'), {})
    category_key = CATEGORY_KEYS.get(category, 'general')
    parts = []

    general = messages.get('reversed_interpretations' if is_reversed else 'upright_interpretations')
    if general:
        parts.append(pick(general, seed))
    else:
        meaning = symbol.get('reversed_meaning' if is_reversed else 'upright_meaning')
        if meaning:
            parts.append(meaning)

    position_key = POSITION_KEYS.get(position)
    if position_key:
        parts.append(pick(messages.get('position_interpretations', {}).get(position_key), seed))

    category_messages = messages.get('category_interpretations', {})
    category_text = pick(category_messages.get(category_key) or category_messages.get('general'), seed)
    if not category_text:
        meanings = symbol.get('meanings', {}).get('reversed' if is_reversed else 'upright', {})
        category_text = meanings.get(MEANING_KEYS[category_key]) or ''
        if category_text and category_text in parts:
            category_text = ''
    parts.append(category_text)

    if time_of_day in TIME_OF_DAY_KEYS:
        parts.append(pick(messages.get('timing_messages', {}).get(time_of_day), seed))

    parts = [part for part in parts if part]
    if not parts:
        return fallback_text(position, symbol)
    return ' '.join(parts)
