"""Faker-backed source of atomic fake values.

The provider owns one Faker instance seeded at instance level, so the value
stream depends only on the seed and the order of calls. It is constructed
once per run and passed explicitly to everything that draws values.
"""

from __future__ import annotations

from faker import Faker

DEFAULT_LOCALE = "en_US"


class FakeValueProvider:
    """Seeded supplier of names, domains, cities, job titles and integers.

    Attributes:
        seed: Random seed for reproducibility
        fake: Faker instance for data generation

    Example:
        >>> provider = FakeValueProvider(seed=1)
        >>> first = provider.first_name()
        >>> age = provider.number(18, 99)
    """

    def __init__(self, seed: int = 0, locale: str = DEFAULT_LOCALE) -> None:
        """Initialize the provider with a seed.

        Args:
            seed: Random seed. Same seed produces identical values across runs.
            locale: Faker locale.
        """
        self.seed = seed
        self.locale = locale
        self.fake = Faker(locale)
        self.fake.seed_instance(seed)

    def first_name(self) -> str:
        return self.fake.first_name()

    def last_name(self) -> str:
        return self.fake.last_name()

    def middle_name(self) -> str:
        # Faker has no middle-name provider; any given name works as one.
        return self.fake.first_name()

    def domain_name(self) -> str:
        return self.fake.domain_name()

    def city(self) -> str:
        return self.fake.city()

    def job_title(self) -> str:
        return self.fake.job()

    def number(self, low: int, high: int) -> int:
        """Draw an integer in ``[low, high]``, both ends inclusive."""
        return self.fake.random_int(min=low, max=high)

    def reset(self) -> None:
        """Rewind the value stream to the start of the seed."""
        self.fake.seed_instance(self.seed)
