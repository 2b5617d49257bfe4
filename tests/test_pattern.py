"""Tests for the shared pattern-matching convention."""

from types import MappingProxyType

import pytest

from remote_maybe import (
    Absent,
    IncompletePatternError,
    Loading,
    NotAsked,
    Present,
    Succeeded,
    UnknownCaseError,
    init,
    maybe,
)
from remote_maybe import remote_data as rd


class TestResolution:
    """Tests for handler resolution order."""

    def test_payload_less_handlers_get_no_arguments(self):
        """Handlers for payload-less variants are called with no arguments."""
        seen = []
        maybe.match({'absent': lambda *args: seen.append(args)}, Absent)
        rd.match({'loading': lambda *args: seen.append(args)}, Loading)
        assert seen == [(), ()]

    def test_fallback_gets_no_arguments(self):
        """The fallback is called with no arguments."""
        seen = []
        maybe.match({'_': lambda *args: seen.append(args)}, Present(1))
        assert seen == [()]

    def test_fallback_only_pattern(self):
        """A pattern with only a fallback matches every variant."""
        assert rd.match({'_': lambda: 'any'}, Succeeded(1)) == 'any'

    def test_none_handler_counts_as_missing(self):
        """A handler set to None is treated as missing."""
        assert maybe.match({'present': None, '_': lambda: 'fallback'}, Present(1)) == 'fallback'

    def test_any_mapping_is_accepted(self):
        """Any Mapping works as a pattern, not just dict."""
        pattern = MappingProxyType({'present': lambda x: x + 1, 'absent': lambda: 0})
        assert maybe.match(pattern, Present(1)) == 2


class TestIncompletePattern:
    """Tests for patterns with no handler for the active case."""

    def test_maybe_raises(self):
        """A Maybe pattern missing the active case raises."""
        with pytest.raises(IncompletePatternError, match="no handler for 'absent'") as exc_info:
            maybe.match({'present': lambda x: x}, Absent)
        assert exc_info.value.variant == 'absent'
        assert exc_info.value.cases == ('present',)

    @pytest.mark.parametrize(
        ('value', 'case'),
        [(NotAsked, 'not_asked'), (Loading, 'loading'), (rd.failed('x'), 'failed')],
    )
    def test_remote_data_raises(self, value, case):
        """A RemoteData pattern missing the active case raises."""
        with pytest.raises(IncompletePatternError) as exc_info:
            rd.match({'succeeded': lambda x: x}, value)
        assert exc_info.value.variant == case

    def test_empty_pattern_raises(self):
        """An empty pattern has no handler for any case."""
        with pytest.raises(IncompletePatternError):
            maybe.match({}, Present(1))

    def test_is_lookup_error(self):
        """IncompletePatternError is a LookupError."""
        with pytest.raises(LookupError):
            maybe.match({}, Absent)

    def test_lenient_mode_returns_none(self):
        """With strict patterns off, a missing handler yields None."""
        init(strict_patterns=False)
        assert maybe.match({'present': lambda x: x}, Absent) is None
        assert rd.match({}, Loading) is None

    def test_lenient_mode_from_environment(self, monkeypatch):
        """The lenient mode can be turned on from the environment."""
        monkeypatch.setenv('REMOTE_MAYBE_STRICT_PATTERNS', 'false')
        assert rd.match({'succeeded': lambda x: x}, NotAsked) is None


class TestInvalidPattern:
    """Tests for malformed patterns."""

    def test_unknown_case_raises(self):
        """A misspelled case name raises."""
        with pytest.raises(UnknownCaseError, match='presnt') as exc_info:
            maybe.match({'presnt': lambda x: x, '_': lambda: 0}, Present(1))
        assert exc_info.value.names == ('presnt',)
        assert exc_info.value.container == 'Maybe'

    def test_non_string_key_raises_unknown_case(self):
        """Keys that are not strings are reported as unknown cases."""
        with pytest.raises(UnknownCaseError, match=r'in pattern: 1$') as exc_info:
            maybe.match({1: lambda: 0, '_': lambda: 0}, Absent)  # type: ignore[dict-item]
        assert exc_info.value.names == (1,)

    def test_other_containers_cases_are_unknown(self):
        """RemoteData case names are not Maybe case names, and vice versa."""
        with pytest.raises(UnknownCaseError):
            maybe.match({'succeeded': lambda x: x, '_': lambda: 0}, Present(1))
        with pytest.raises(UnknownCaseError):
            rd.match({'present': lambda x: x, '_': lambda: 0}, Succeeded(1))

    def test_unknown_case_raises_even_in_lenient_mode(self):
        """Unknown keys raise even when strict patterns are off."""
        init(strict_patterns=False)
        with pytest.raises(UnknownCaseError):
            maybe.match({'nothing': lambda: 0}, Absent)

    def test_non_mapping_raises(self):
        """A pattern that is not a mapping raises TypeError."""
        with pytest.raises(TypeError, match='must be a mapping'):
            maybe.match([('present', len)], Present('x'))  # type: ignore[arg-type]
