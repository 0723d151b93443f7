from django.core.exceptions import ValidationError
from django.utils.deconstruct import deconstructible
from django.utils.translation import gettext_lazy as _

from .conf import get_plate_factory


@deconstructible
class PlateValidator:
    message = _('Enter a valid plate: %(length)s characters, digits followed by letters.')
    code = 'invalid_plate'

    def __init__(self, factory=None, message=None, code=None):
        self.factory = factory
        if message is not None:
            self.message = message
        if code is not None:
            self.code = code

    def __call__(self, value):
        # Settings are read lazily so overrides in tests apply
        factory = self.factory or get_plate_factory()

        if not factory.is_valid(value):
            raise ValidationError(
                self.message, code=self.code, params={'value': value, 'length': factory.length}
            )

    def __eq__(self, other):
        return (
            isinstance(other, PlateValidator)
            and self.factory == other.factory
            and self.message == other.message
            and self.code == other.code
        )
