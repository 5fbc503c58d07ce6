"""passwdqc password strength checking package.

The objects listed in ``__all__`` form the supported public surface.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("passwdqc")
except PackageNotFoundError:  # pragma: no cover - happens only from source checkout
    __version__ = "0.0.0-dev"

from passwdqc.checker import PasswordChecker, check
from passwdqc.errors import ConfigFileError, PasswdqcError, PolicyError, WordListError
from passwdqc.models import CheckResult, RejectionReason, UserIdentity
from passwdqc.params import DISABLED, Policy, Similar, load_config
from passwdqc.wordlist import DEFAULT_WORDS, WordCorpus, load_wordlist

__all__ = [
    "CheckResult",
    "ConfigFileError",
    "DEFAULT_WORDS",
    "DISABLED",
    "PasswdqcError",
    "PasswordChecker",
    "Policy",
    "PolicyError",
    "RejectionReason",
    "Similar",
    "UserIdentity",
    "WordCorpus",
    "WordListError",
    "__version__",
    "check",
    "load_config",
    "load_wordlist",
]
