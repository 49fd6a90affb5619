class BoardError(Exception):
    """Invalid input to the board engine. Raised before any state is touched."""
    pass


class UnknownStaffError(BoardError):
    pass


class SlotOutOfRangeError(BoardError):
    pass


class UnknownWorkTypeError(BoardError):
    pass


class RowAlreadyStaffedError(BoardError):
    pass
