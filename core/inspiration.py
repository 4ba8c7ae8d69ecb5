import random
from dataclasses import dataclass

from core.long_weekend import LongWeekendOpportunity

THEMES = ("Petualangan", "Relaksasi", "Kuliner", "Budaya")


@dataclass(frozen=True)
class Inspiration:
    weekend: LongWeekendOpportunity
    theme: str

    def to_dict(self) -> dict:
        return {"weekend": self.weekend.to_dict(), "theme": self.theme}


def pick_inspiration(opportunities, rng: random.Random | None = None) -> Inspiration | None:
    """Pilih satu libur panjang dan satu tema secara acak ("Kejutkan Saya!")."""
    opportunities = list(opportunities)
    if not opportunities:
        return None

    rng = rng or random.Random()
    return Inspiration(
        weekend=rng.choice(opportunities),
        theme=rng.choice(THEMES),
    )
