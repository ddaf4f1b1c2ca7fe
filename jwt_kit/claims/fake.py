"""Whimsical claim values backed by Faker."""

import time

from faker import Faker
from faker.providers import BaseProvider

BEER_NAMES = (
    "Pliny The Elder",
    "Founders Kentucky Breakfast",
    "Trappistes Rochefort 10",
    "HopSlam Ale",
    "Stone Imperial Russian Stout",
    "St. Bernardus Abt 12",
    "Founders Breakfast Stout",
    "Weihenstephaner Hefeweissbier",
    "Westvleteren 12",
    "La Fin Du Monde",
    "Two Hearted Ale",
    "Orval Trappist Ale",
    "Duvel",
    "Chimay Grande Reserve",
    "Heady Topper",
    "Sierra Nevada Celebration Ale",
    "Bell's Hopslam",
    "Ten FIDY",
    "Old Rasputin Russian Imperial Stout",
    "Schneider Aventinus",
    "Brooklyn Black Chocolate Stout",
    "Ayinger Celebrator Doppelbock",
    "Unibroue Trois Pistoles",
    "Rodenbach Grand Cru",
    "Dogfish Head 90 Minute IPA",
    "Arrogant Bastard Ale",
    "Samuel Smith's Oatmeal Stout",
    "Saison Dupont",
    "Guinness Foreign Extra Stout",
    "Anchor Steam Beer",
)


class BeerProvider(BaseProvider):
    """Faker provider for beer names."""

    def beer_name(self) -> str:
        return self.random_element(BEER_NAMES)


class BeerOracle:
    """Produces the ``beer_of_the_day`` claim value."""

    def __init__(self, faker: Faker) -> None:
        self._faker = faker

    @classmethod
    def seeded(cls, seed: int | None = None) -> "BeerOracle":
        """Build an oracle seeded from the wall clock unless a seed is given."""
        faker = Faker()
        faker.add_provider(BeerProvider)
        faker.seed_instance(time.time_ns() if seed is None else seed)
        return cls(faker)

    def produce_string(self) -> str:
        return self._faker.beer_name()
