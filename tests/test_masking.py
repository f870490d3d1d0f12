"""
Tests for masking resolved values in logs.
"""

import logging

from interpolator.security.masking import MaskingFilter, ValueMasker


class TestValueMasker:

    def test_mask_text(self):
        masker = ValueMasker()
        masker.register('supersecret123')
        masker.register('key_abcd1234')

        text = "postgres://user:supersecret123@db?api_key=key_abcd1234"

        assert masker.mask_text(text) == "postgres://user:***@db?api_key=***"

    def test_empty_values_not_registered(self):
        masker = ValueMasker()
        masker.register('')

        assert masker.mask_text('nothing to hide') == 'nothing to hide'

    def test_longer_values_masked_first(self):
        masker = ValueMasker()
        masker.register('abc')
        masker.register('abcdef')

        assert masker.mask_text('x abcdef y') == 'x *** y'

    def test_regex_characters_in_values(self):
        masker = ValueMasker()
        masker.register('a.b*c')

        assert masker.mask_text('a.b*c axbbc') == '*** axbbc'

    def test_mask_dict_recursive(self):
        masker = ValueMasker()
        masker.register('token')

        data = {'auth': {'header': 'Bearer token'}, 'count': 3}

        assert masker.mask_dict(data) == {'auth': {'header': 'Bearer ***'}, 'count': 3}

    def test_clear(self):
        masker = ValueMasker()
        masker.register('token')
        masker.clear()

        assert masker.mask_text('token') == 'token'


class TestMaskingFilter:

    def _record(self, msg, args=()):
        return logging.LogRecord('interpolator', logging.INFO, __file__, 1, msg, args, None)

    def test_masks_message(self):
        masker = ValueMasker()
        masker.register('hunter2')

        record = self._record('password is hunter2')
        assert MaskingFilter(masker).filter(record) is True

        assert record.getMessage() == 'password is ***'

    def test_masks_tuple_args(self):
        masker = ValueMasker()
        masker.register('hunter2')

        record = self._record('password is %s (%d)', ('hunter2', 7))
        MaskingFilter(masker).filter(record)

        assert record.getMessage() == 'password is *** (7)'
