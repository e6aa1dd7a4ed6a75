import logging
import os


class DigitViewConfig:
    """
    Process-wide switches for the digit view package.
    """
    # toggleable logging config
    logging_enabled = False
    verbosity = 0
    default_radix = 10

    @staticmethod
    def configure(enabled: bool = True, verbosity: int = 1, default_radix: int | None = None):
        """
        Turn on/off logging and set verbosity (1=construction, 2=digit writes).
        Optionally change the radix used when a view is built without one.
        """
        if default_radix is not None:
            DigitViewConfig.default_radix = check_radix(default_radix)
        DigitViewConfig.logging_enabled = enabled
        DigitViewConfig.verbosity = verbosity
        level = logging.DEBUG if enabled and verbosity > 0 else logging.INFO
        logging.getLogger().setLevel(level)
        logging.debug(f"[configure] enabled={enabled}, verbosity={verbosity}, "
                      f"default_radix={DigitViewConfig.default_radix}")


def check_radix(radix) -> int:
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise TypeError(f"radix must be an int, got {type(radix).__name__}")
    if radix <= 1:
        raise ValueError(f"radix must be larger than 1, got {radix}")
    return radix


def _configure_from_env():
    raw = os.environ.get("DIGITVIEW_LOG")
    if not raw:
        return
    try:
        verbosity = int(raw)
    except ValueError:
        verbosity = 1
    DigitViewConfig.configure(enabled=verbosity > 0, verbosity=verbosity)


_configure_from_env()
