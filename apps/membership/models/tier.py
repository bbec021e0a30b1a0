from django.db import models


class Tier(models.IntegerChoices):
    """Loyalty tiers, lowest first. The integer value is the rank."""
    EXPLORER = 0, 'Explorer'
    PARTICIPANT = 1, 'Participant'
    CONTRIBUTOR = 2, 'Contributor'
    CHAMPION = 3, 'Champion'

    @classmethod
    def lowest(cls):
        return cls.EXPLORER

    @classmethod
    def highest(cls):
        return cls.CHAMPION

    @classmethod
    def parse(cls, value):
        """
        Resolve a Tier from a member, a rank or a name (case-insensitive).
        Raises ValueError for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown tier: {value!r}") from None
        raise ValueError(f"Cannot interpret {value!r} as a tier")

    @property
    def key(self):
        """Lowercase identifier used in settings and API payloads."""
        return self.name.lower()
