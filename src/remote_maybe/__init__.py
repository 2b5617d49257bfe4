"""remote-maybe: Maybe and RemoteData containers plus pipe/compose/curry.

Flat imports (types, constructors, predicates, combinators):
    from remote_maybe import Present, Absent, present, absent
    from remote_maybe import Succeeded, Failed, NotAsked, Loading, succeeded, failed
    from remote_maybe import pipe, compose, curry

Module imports (curried operations, which share names across containers):
    from remote_maybe import maybe, remote_data as rd
    maybe.map(f, value)
    rd.with_default(0)(state)
"""

from remote_maybe import maybe, remote_data

# Configuration
from remote_maybe._config import Settings, get_config, init, reset

# Logging
from remote_maybe._logging import configure_logging, get_logger

# Composition
from remote_maybe.compose import Curried, compose, curry, identity, pipe

# Errors
from remote_maybe.errors import (
    IncompletePattern,
    IncompletePatternError,
    MissingArgument,
    MissingArgumentError,
    UnknownCase,
    UnknownCaseError,
)

# Maybe
from remote_maybe.maybe import (
    Absent,
    AbsentType,
    Maybe,
    Present,
    absent,
    from_optional,
    is_absent,
    is_present,
    present,
)

# RemoteData
from remote_maybe.remote_data import (
    Failed,
    Loading,
    LoadingType,
    NotAsked,
    NotAskedType,
    RemoteData,
    Succeeded,
    failed,
    from_callable,
    is_failed,
    is_loading,
    is_not_asked,
    is_settled,
    is_succeeded,
    loading,
    not_asked,
    succeeded,
)

__all__ = [
    # Maybe
    'Absent',
    'AbsentType',
    # Composition
    'Curried',
    # RemoteData
    'Failed',
    # Errors
    'IncompletePattern',
    'IncompletePatternError',
    'Loading',
    'LoadingType',
    'Maybe',
    'MissingArgument',
    'MissingArgumentError',
    'NotAsked',
    'NotAskedType',
    'Present',
    'RemoteData',
    # Configuration
    'Settings',
    'Succeeded',
    'UnknownCase',
    'UnknownCaseError',
    'absent',
    'compose',
    # Logging
    'configure_logging',
    'curry',
    'failed',
    'from_callable',
    'from_optional',
    'get_config',
    'get_logger',
    'identity',
    'init',
    'is_absent',
    'is_failed',
    'is_loading',
    'is_not_asked',
    'is_present',
    'is_settled',
    'is_succeeded',
    'loading',
    # Modules
    'maybe',
    'not_asked',
    'pipe',
    'present',
    'remote_data',
    'reset',
    'succeeded',
]
