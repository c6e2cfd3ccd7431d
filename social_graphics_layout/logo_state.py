"""
Session-scoped logo enable/disable flag.

The flag lives only in memory. It starts enabled, initialize() resets it
to enabled no matter what came before, and nothing is ever written to or
read from storage.
"""

# Standard Library
import math


#============================================
def coerce_truthy(value) -> bool:
	"""
	Convert a loosely typed value to a boolean.

	Callers may pass checkbox values, strings or numbers; any truthy
	value counts as True. NaN counts as False, matching browser form
	values.

	Args:
		value: Any value.

	Returns:
		Boolean.
	"""
	if isinstance(value, float) and math.isnan(value):
		return False
	return bool(value)


class LogoToggle:
	"""
	Two-state flag gating whether the logo takes part in a layout.
	"""

	def __init__(self):
		self._enabled = True

	def is_enabled(self) -> bool:
		return self._enabled

	def set_enabled(self, value) -> None:
		self._enabled = coerce_truthy(value)

	def initialize(self) -> None:
		self._enabled = True
