"""Revision Request Builder - composes the prompt sent to Gemini."""

from __future__ import annotations

from reminder_reviser.errors import ValidationError
from reminder_reviser.models.tone import ToneVariant

PROMPT_TEMPLATE = """\
あなたはビジネス文書の添削専門家です。以下の催促・リマインド文面を添削してください。

【トーン設定】
{instruction}

【添削対象の文面】
{original_text}

以下のJSON形式で回答してください（JSONのみ、他のテキストは不要）：
{{
  "revised": "添削後の文面（改行は\\nで表現）",
  "feedback": "改善ポイントの説明（Markdown形式の箇条書きで3-5点。例: - **ポイント1**: 説明\\n- **ポイント2**: 説明）"
}}"""


def build_prompt(original_text: str, tone: ToneVariant) -> str:
    """Build the single instruction string for one revision.

    ``original_text`` is embedded verbatim; callers validate that it is not
    blank before calling.
    """
    if not original_text or not original_text.strip():
        raise ValidationError("original_text is empty")
    return PROMPT_TEMPLATE.format(
        instruction=tone.instruction,
        original_text=original_text,
    )
