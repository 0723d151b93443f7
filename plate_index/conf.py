import typing

from django.conf import settings

from .plates import DIGITS, LETTERS, PLATE_LENGTH, PlateFactory

DEFAULTS = {
    'DIGITS': DIGITS,
    'LETTERS': LETTERS,
    'LENGTH': PLATE_LENGTH,
}


def get_config() -> typing.Dict[str, typing.Any]:
    """
    Merge the optional ``PLATE_INDEX`` setting over the defaults.

    Works without configured settings, in which case the defaults are returned.
    """
    config = dict(DEFAULTS)

    if settings.configured:
        config.update(getattr(settings, 'PLATE_INDEX', {}))

    return config


def get_plate_factory() -> PlateFactory:
    config = get_config()

    return PlateFactory(
        digits=config['DIGITS'],
        letters=config['LETTERS'],
        length=config['LENGTH'],
    )
