"""
Error types for layout and input validation.
"""


class LayoutError(Exception):
	"""
	Base class for layout engine errors.
	"""


class DegenerateElementError(LayoutError, ValueError):
	"""
	Raised when an element has no usable width or height to fit.
	"""


class ValidationError(ValueError):
	"""
	Base class for user input problems reported by the validators.
	"""

	code = "invalid"

	def __init__(self, message: str):
		super().__init__(message)
		self.message = message


class MissingFileError(ValidationError):
	code = "missing_file"


class InvalidFileTypeError(ValidationError):
	code = "invalid_file_type"


class FileTooLargeError(ValidationError):
	code = "file_too_large"


class EmptyTextError(ValidationError):
	code = "empty_text"


class MissingSelectionError(ValidationError):
	code = "missing_selection"


class InvalidFontError(ValidationError):
	code = "invalid_font"
