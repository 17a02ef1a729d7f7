"""Static catalogs: tone variants, sample texts, and writing tips."""

from __future__ import annotations

from reminder_reviser.models.tone import SampleText, ToneVariant

DEFAULT_TONE = "standard"

TONES: tuple[ToneVariant, ...] = (
    ToneVariant(
        key="soft",
        label="やわらかめ",
        emoji="🌸",
        description="関係維持重視",
        instruction=(
            "相手との関係を最優先に考え、非常に丁寧で柔らかい表現を使用してください。"
            "申し訳なさを前面に出し、お願いベースの文面にしてください。"
        ),
    ),
    ToneVariant(
        key="standard",
        label="ふつう",
        emoji="✉️",
        description="バランス型",
        instruction=(
            "ビジネスマナーに沿った標準的な丁寧さで、"
            "要件を明確に伝えつつも礼儀正しい表現を使用してください。"
        ),
    ),
    ToneVariant(
        key="firm",
        label="しっかり",
        emoji="📋",
        description="緊急性重視",
        instruction=(
            "緊急性や重要性を明確に伝えつつも、失礼にならない範囲で強めの表現を使用してください。"
            "期限や影響を具体的に示してください。"
        ),
    ),
)

SAMPLES: tuple[SampleText, ...] = (
    SampleText(
        label="支払い",
        text="先日お送りした請求書の件ですが、まだ入金が確認できていません。確認お願いします。",
    ),
    SampleText(
        label="返信",
        text="先週メールした件、返事もらえますか？急ぎなので早めにお願いします。",
    ),
    SampleText(
        label="資料",
        text="資料の提出期限過ぎてますけど、いつ出せますか？",
    ),
)

TIPS: tuple[str, ...] = (
    "クッション言葉を添える",
    "相手を責めない表現",
    "期限・背景を具体的に",
    "感謝で締める",
)

_TONES_BY_KEY: dict[str, ToneVariant] = {t.key: t for t in TONES}


def get_tone(key: str) -> ToneVariant:
    """Look up a tone variant by key. Raises KeyError for unknown keys."""
    try:
        return _TONES_BY_KEY[key]
    except KeyError:
        raise KeyError(f"Unknown tone: {key!r} (expected one of {', '.join(_TONES_BY_KEY)})") from None


def get_sample(label: str) -> SampleText:
    for sample in SAMPLES:
        if sample.label == label:
            return sample
    raise KeyError(f"Unknown sample: {label!r}")
