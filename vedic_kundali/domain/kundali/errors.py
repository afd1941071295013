class KundaliError(Exception):
    """
    Base exception for all kundali-related domain errors.
    """
    pass


class InputError(KundaliError, ValueError):
    """
    Raised when birth inputs are malformed, out of range,
    or missing the UTC offset needed to place them in time.
    """
    pass


class UnsupportedAyanamsaError(InputError):
    """
    Raised when an unsupported ayanamsa is requested.
    """
    pass


class CalculationError(KundaliError):
    """
    Raised when astronomical calculation fails.
    """
    pass


class ComputationSingularity(CalculationError):
    """
    Raised when the ascendant formula degenerates
    (extreme polar latitudes, ecliptic lying on the horizon).
    """
    pass


class PrecisionWarning(UserWarning):
    """
    Advisory for instants outside the validated range
    of the mean-element polynomials. Never fatal.
    """
    pass
