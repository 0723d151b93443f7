#!/usr/bin/env python

"""
test_django-plate-index
------------

Tests for `django-plate-index` forms, validators and settings.
"""
from django import forms
from django.core.exceptions import ValidationError
from django.test import SimpleTestCase, override_settings

from plate_index.conf import get_config, get_plate_factory
from plate_index.forms import PlateField, PlateIndexField
from plate_index.plates import PlateFactory
from plate_index.validators import PlateValidator


class RegistrationForm(forms.Form):
    plate = PlateField()
    position = PlateIndexField(required=False)


class TestPlateValidator(SimpleTestCase):

    def test_valid_plate(self):
        PlateValidator()('0000AB')

    def test_invalid_plate(self):
        with self.assertRaises(ValidationError) as cm:
            PlateValidator()('AB0000')

        self.assertEqual('invalid_plate', cm.exception.code)

    def test_custom_factory(self):
        validator = PlateValidator(factory=PlateFactory(length=3))

        validator('1AB')

        with self.assertRaises(ValidationError):
            validator('0000AB')

    def test_equality(self):
        self.assertEqual(PlateValidator(), PlateValidator())
        self.assertNotEqual(PlateValidator(), PlateValidator(code='other'))


class TestPlateFields(SimpleTestCase):

    def test_plate_field_normalizes(self):
        self.assertEqual('0001AB', PlateField().clean(' 0001ab '))

    def test_plate_field_rejects(self):
        with self.assertRaises(ValidationError):
            PlateField().clean('00A00B')

    def test_plate_index_field(self):
        field = PlateIndexField()

        self.assertEqual('000000', field.clean('0'))
        self.assertEqual('00000A', field.clean('1000000'))
        self.assertEqual('ZZZZZZ', field.clean(501363135))

    def test_plate_index_field_negative(self):
        with self.assertRaises(ValidationError) as cm:
            PlateIndexField().clean('-1')

        self.assertEqual('invalid_index', cm.exception.code)

    def test_plate_index_field_out_of_range(self):
        with self.assertRaises(ValidationError) as cm:
            PlateIndexField().clean('501363136')

        self.assertEqual('out_of_range', cm.exception.code)

    def test_form(self):
        form = RegistrationForm(data={'plate': '123abc', 'position': '10359992'})

        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual('123ABC', form.cleaned_data['plate'])
        self.assertEqual('9992ZZ', form.cleaned_data['position'])

    def test_form_optional_position(self):
        form = RegistrationForm(data={'plate': '000000', 'position': ''})

        self.assertTrue(form.is_valid(), form.errors)
        self.assertIsNone(form.cleaned_data['position'])

    def test_form_errors(self):
        form = RegistrationForm(data={'plate': 'ABC123', 'position': '-5'})

        self.assertFalse(form.is_valid())
        self.assertIn('plate', form.errors)
        self.assertIn('position', form.errors)


class TestSettings(SimpleTestCase):

    def test_defaults(self):
        self.assertEqual(
            {'DIGITS': '0123456789', 'LETTERS': 'ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'LENGTH': 6},
            get_config()
        )
        self.assertEqual(PlateFactory(), get_plate_factory())

    @override_settings(PLATE_INDEX={'LENGTH': 4})
    def test_override(self):
        self.assertEqual(PlateFactory(length=4), get_plate_factory())
        self.assertEqual('000A', PlateIndexField().clean('10000'))
        self.assertEqual('12AB', PlateField().clean('12ab'))

        with self.assertRaises(ValidationError):
            PlateField().clean('0012AB')
