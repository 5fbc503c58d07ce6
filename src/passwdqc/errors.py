"""Custom exceptions for passwdqc."""


class PasswdqcError(Exception):
    """Base exception for passwdqc."""


class PolicyError(PasswdqcError, ValueError):
    """Policy value or option is invalid."""


class ConfigFileError(PasswdqcError):
    """Configuration file cannot be read."""


class WordListError(PasswdqcError):
    """Word list file cannot be read."""
