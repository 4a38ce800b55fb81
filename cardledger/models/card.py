from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rarity:
    """A rarity from the fixed rarity vocabulary (e.g. "Ultra Rare")."""

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class CardType:
    """
    A card type, split into main and sub category.

    Attributes:
        main: Main category (e.g. "Monster", "Spell Card")
        sub: Sub category (e.g. "Effect", "Quick-Play")
        id: Database id, None until stored
    """

    main: str
    sub: str
    id: int | None = None

    @classmethod
    def from_label(cls, label: str) -> "CardType":
        """
        Build a card type from a "SUBTYPE MAINTYPE" label.

        Splits on the first space: "Normal Spell Card" -> sub "Normal",
        main "Spell Card".

        Raises:
            ValueError: If the label has no space separating the two parts
        """
        sub, sep, main = label.strip().partition(" ")
        if not sep or not sub or not main.strip():
            raise ValueError(f"Card type label must look like 'SUBTYPE MAINTYPE', got {label!r}")
        return cls(main=main.strip(), sub=sub)

    def display(self) -> str:
        return f"{self.sub} {self.main}"


@dataclass(frozen=True, slots=True)
class Series:
    """
    A released set of cards.

    Attributes:
        name: Unique series name
        release_date: Human date string ("September 5, 2025" or "2025-09-05")
        n_cards: Number of cards the series is expected to contain
        prefix: Short code used in card numbers (e.g. "LOB")
        id: Database id, None until stored
    """

    name: str
    release_date: str
    n_cards: int = 0
    prefix: str | None = None
    id: int | None = None


@dataclass(slots=True)
class Card:
    """
    A card row as stored, referencing its series, rarity and type by id.

    Attributes:
        name: Card name
        number: Globally unique card number (e.g. "LOB-001")
        series_id: Owning series id
        rarity_id: Rarity id
        card_type_id: Card type id
        collection_number: Ordinal within the series, 0 when unknown
        in_collection: Number of owned copies, never negative
    """

    name: str
    number: str
    series_id: int
    rarity_id: int
    card_type_id: int
    collection_number: int = 0
    in_collection: int = 0


@dataclass(frozen=True, slots=True)
class CardDetails:
    """A card joined with its resolved series, rarity and card type."""

    card: Card
    series: Series
    rarity: Rarity
    card_type: CardType

    @property
    def name(self) -> str:
        return self.card.name

    @property
    def number(self) -> str:
        return self.card.number

    @property
    def in_collection(self) -> int:
        return self.card.in_collection
