import logging

from django import forms
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from .conf import get_plate_factory
from .exceptions import InvalidArgument, OutOfRange
from .validators import PlateValidator

logger = logging.getLogger(__name__)


class PlateField(forms.CharField):
    """
    Accepts a plate, normalizing case and surrounding whitespace.
    Cleans to the canonical plate string.
    """

    def __init__(self, *, factory=None, **kwargs):
        self.factory = factory
        super().__init__(**kwargs)
        self.validators.append(PlateValidator(factory=factory))

    def to_python(self, value):
        value = super().to_python(value)

        if value in self.empty_values:
            return value

        return value.upper()


class PlateIndexField(forms.IntegerField):
    """
    Accepts a position in the plate sequence.
    Cleans to the plate found at that position.
    """

    default_error_messages = {
        'invalid_index': _('Enter a non-negative position.'),
        'out_of_range': _('Ensure this position is less than or equal to %(max)s.'),
    }

    def __init__(self, *, factory=None, **kwargs):
        self.factory = factory
        super().__init__(**kwargs)

    def clean(self, value):
        index = super().clean(value)

        if index in self.empty_values:
            return index

        factory = self.factory or get_plate_factory()

        try:
            return factory.encode(index)
        except InvalidArgument:
            logger.debug("Rejected plate position %r", index)
            raise ValidationError(self.error_messages['invalid_index'], code='invalid_index')
        except OutOfRange:
            logger.debug("Rejected plate position %r, last is %d", index, factory.total - 1)
            raise ValidationError(
                self.error_messages['out_of_range'],
                code='out_of_range',
                params={'max': factory.total - 1},
            )
