import jaconv

from wareki_conv.base_class import Era

FIRST_YEAR_TOKEN = "元"


class JapaneseCalendarConverter:
    """和暦の正規化と西暦年への変換を行うクラス."""

    @classmethod
    def normalize_width(cls, text: str) -> str:
        """全角英数字・記号を半角に変換. 漢字やかなはそのまま."""
        return jaconv.z2h(text, kana=False, ascii=True, digit=True)

    @classmethod
    def replace_first_year(cls, text: str) -> str:
        """「元年」の元を1に置き換える."""
        return text.replace(FIRST_YEAR_TOKEN, "1")

    @classmethod
    def resolve_era(cls, text: str) -> Era:
        """先頭の文字から元号を判定.

        略号がない場合は現在の元号とみなす. 未知の文字も同様に令和になる.
        """
        if not text:
            return Era.current()
        return Era.from_marker(text[0]) or Era.current()

    @classmethod
    def to_western_year(cls, era: Era, era_year: int) -> int:
        """和暦の年を西暦に変換.

        Args:
            era: 元号
            era_year: 元号での年 (元年は1)

        Returns:
            西暦の年数
        """
        return era.start_year + era_year - 1


def normalize_width(text: str) -> str:
    return JapaneseCalendarConverter.normalize_width(text)


def resolve_era(normalized: str) -> Era:
    return JapaneseCalendarConverter.resolve_era(normalized)


def to_western_year(era: Era, era_year: int) -> int:
    return JapaneseCalendarConverter.to_western_year(era, era_year)
