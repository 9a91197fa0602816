r"""
Answer Formatter: 답변 텍스트 → 제한된 표시용 markup.

두 규칙을 순서대로 적용 (규칙 2는 규칙 1의 출력에 적용):
1. **text** → <strong>text</strong>  (non-greedy, 왼쪽→오른쪽)
2. [선택적 \n] *text \n → <br />*text<br />  (전역, 겹치지 않는 매치)

text 부분은 줄 종결 문자(\n, \r, U+2028, U+2029)를 포함하지 않는다.
CRLF 줄은 규칙 2 대상이 아님 (\r 때문에 \n까지 이어지지 않음).

모든 문자열 입력에 대해 정의됨 (실패 없음).

⚠️ 기본값은 원문을 escape하지 않는다 (출력은 신뢰된 raw markup 취급).
escape_html=True면 규칙 적용 전에 입력을 HTML escape → 규칙이 만든 태그만 markup.
"""

import html
import re

# 매치는 한 줄 안에서만: 줄 종결 문자(\n \r U+2028 U+2029) 제외
LINE_CHARS = r"[^\n\r\u2028\u2029]"

BOLD_PATTERN = re.compile(rf"\*\*({LINE_CHARS}*?)\*\*")
BULLET_LINE_PATTERN = re.compile(rf"\n?\*({LINE_CHARS}*?)\n")

BOLD_REPLACEMENT = r"<strong>\1</strong>"
BULLET_LINE_REPLACEMENT = r"<br />*\1<br />"


def format_answer(text: str, *, escape_html: bool = False) -> str:
    """
    답변 텍스트를 표시용 markup으로 변환.

    Args:
        text: provider 원문 답변
        escape_html: True면 원문의 HTML을 먼저 escape

    Returns:
        <strong>, <br />, 리터럴 * 만 포함하는 문자열
    """
    if escape_html:
        text = html.escape(text, quote=False)

    formatted = BOLD_PATTERN.sub(BOLD_REPLACEMENT, text)
    formatted = BULLET_LINE_PATTERN.sub(BULLET_LINE_REPLACEMENT, formatted)
    return formatted
