"""Age eligibility rules per country."""

# Minimum legal driving age, keyed by ISO country code.
LEGAL_DRIVING_AGE: dict[str, int] = {
    "US": 16,
    "UK": 17,
}


def can_drive(age: int, country_code: str) -> bool:
    """Is a person of this age allowed to drive in the given country?

    Raises:
        ValueError: If the country code has no driving rule.
    """
    legal_age = LEGAL_DRIVING_AGE.get(country_code)
    if legal_age is None:
        raise ValueError(f"Invalid country code: {country_code!r}")
    return age >= legal_age
