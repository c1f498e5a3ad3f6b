from __future__ import annotations


class SacchError(Exception):
    """
    Base class for every error raised by sacch.
    """


class UnknownFieldError(SacchError, KeyError):
    """
    Raised if a key is neither a SAC header field nor a pseudo-key.
    """

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return "Error in sac head name: {0}".format(self.name)


class DatetimeParseError(SacchError, ValueError):
    """
    Raised if a DATETIME value is not yyyy-mm-ddThh:mm:ss[.mmm].
    """

    def __init__(self, text: str, reason: str = ""):
        super().__init__(text)
        self.text = text
        self.reason = reason

    def __str__(self):
        msg = "Error in time format: {0}".format(self.text)
        if self.reason:
            msg += " ({0})".format(self.reason)
        return msg


class FieldValueError(SacchError, ValueError):
    """
    Raised if a value can't be stored in the field it is assigned to.
    """


class FileReadError(SacchError, IOError):
    """
    Raised if the given SAC file can't be read or is not a SAC file.
    """


class FileWriteError(SacchError, IOError):
    """
    Raised if the header can't be written back to the SAC file.
    """
