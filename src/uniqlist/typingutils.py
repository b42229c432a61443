__all__ = ['TriState']

TriState = bool | None
