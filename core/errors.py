# core/errors.py


class MalformedUnitDataError(RuntimeError):
    """The static unit tables are inconsistent. Always a data-table bug."""


class UnknownCategoryError(KeyError):
    pass


class UnknownUnitError(KeyError):
    pass
