"""
Text rendering for CLI output.

Card lines are rendered from a user template with these placeholders:
    {name}              card name
    {number}            card number
    {collection_number} ordinal within the series
    {rarity}            rarity name
    {series}            series name
    {card_type}         card type, e.g. "Effect Monster"
    {in_collection}     owned copies

Unknown placeholders are left as-is.
"""

from urllib.parse import quote

from cardledger.models.card import CardDetails, Series

# Words kept lower-case in wiki page titles
WIKI_LOWERCASE_WORDS = frozenset(["the", "of"])


def card_placeholders(details: CardDetails) -> dict[str, str]:
    """Values substituted into a card template."""
    return {
        "name": details.card.name,
        "number": details.card.number,
        "collection_number": str(details.card.collection_number),
        "rarity": details.rarity.name,
        "series": details.series.name,
        "card_type": details.card_type.display(),
        "in_collection": str(details.card.in_collection),
    }


def format_card(details: CardDetails, template: str) -> str:
    """Render one card with a placeholder template."""
    line = template
    for key, value in card_placeholders(details).items():
        line = line.replace("{" + key + "}", value)
    return line


def format_series(series: Series, position: int) -> str:
    """Render one numbered line of a series listing."""
    return f"{position}. {series.name} ({series.release_date}) - {series.n_cards} cards"


def series_wiki_title(query: str) -> str:
    """
    Turn a series name into a wiki page title.

    Words are capitalised except "the" and "of", then joined with "_".
    "legend of blue eyes white dragon" -> "Legend_of_Blue_Eyes_White_Dragon"
    """
    words = []
    for word in query.split():
        if word in WIKI_LOWERCASE_WORDS:
            words.append(word)
        else:
            words.append(word[0].upper() + word[1:])
    return "_".join(words)


def series_wiki_url(query: str, base_url: str) -> str:
    """Build the wiki URL of a series page."""
    return base_url + quote(series_wiki_title(query), safe="_-:()'!,")
