"""Product ratings given by clients."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .storage import count_occurrences


@dataclass
class Rating:
    """One client's rating of one product, between 0 and 5."""

    product_id: int
    client_name: str
    rating: float

    def __post_init__(self) -> None:
        if not 0 <= self.rating <= 5:
            raise ValueError("Rating must be between 0 and 5")

    def to_line(self) -> str:
        return f"{self.product_id}-{self.client_name}-{self.rating:.6g}"

    @classmethod
    def from_line(cls, line: str) -> Rating:
        id_text, first, rest = line.rstrip("\r\n").partition("-")
        name, second, rating_text = rest.partition("-")
        if not (first and second):
            raise ValueError(f"malformed rating line: {line!r}")
        return cls(int(id_text), name, float(rating_text))


class RatingBook:
    """The ratings stored in one file."""

    def __init__(self, path) -> None:
        self.path = Path(path)
        text = self.path.read_text(encoding="utf-8")
        lines = text.split("\n")[: count_occurrences(text, "\n")]
        self._ratings = [Rating.from_line(line) for line in lines]

    def __len__(self) -> int:
        return len(self._ratings)

    def _index_of(self, product_id: int, client_name: str) -> int | None:
        for index, rating in enumerate(self._ratings):
            if rating.product_id == product_id and rating.client_name == client_name:
                return index
        return None

    def average(self, product_id: int) -> float:
        """Mean rating of a product, or 0 when nobody has rated it."""
        scores = [r.rating for r in self._ratings if r.product_id == product_id]
        if not scores:
            return 0.0
        return sum(scores) / len(scores)

    def add_rating(self, product_id: int, client_name: str, rating: float) -> bool:
        """Record a rating; a client may rate each product only once."""
        if self._index_of(product_id, client_name) is not None:
            print("You have already rated this product!")
            return False
        self._ratings.append(Rating(product_id, client_name, rating))
        print(f"{client_name}'s review on product #{product_id} was added.")
        return True

    def remove_rating(self, product_id: int, client_name: str) -> bool:
        index = self._index_of(product_id, client_name)
        if index is None:
            return False
        del self._ratings[index]
        print(f"{client_name}'s review on product #{product_id} was removed.")
        return True

    def save(self) -> None:
        """Overwrite the file with the current ratings."""
        with open(self.path, "w", encoding="utf-8") as output:
            for rating in self._ratings:
                output.write(rating.to_line() + "\n")