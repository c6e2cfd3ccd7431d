import pytest

import social_graphics_layout as sgl
import social_graphics_layout.logo_state


#============================================
def test_toggle_starts_enabled() -> None:
	"""
	A new toggle is enabled.
	"""
	toggle = sgl.logo_state.LogoToggle()
	assert toggle.is_enabled() is True


#============================================
def test_initialize_always_resets_to_enabled() -> None:
	"""
	initialize() is a hard reset regardless of prior state.
	"""
	toggle = sgl.logo_state.LogoToggle()
	toggle.set_enabled(False)
	assert toggle.is_enabled() is False
	toggle.initialize()
	assert toggle.is_enabled() is True
	toggle.initialize()
	assert toggle.is_enabled() is True


#============================================
@pytest.mark.parametrize("value", [1, "true", "false", True, [0], 0.5])
def test_truthy_values_enable(value) -> None:
	"""
	Any truthy value enables the logo.
	"""
	toggle = sgl.logo_state.LogoToggle()
	toggle.set_enabled(False)
	toggle.set_enabled(value)
	assert toggle.is_enabled() is True


#============================================
@pytest.mark.parametrize("value", [0, "", None, False, 0.0, float("nan")])
def test_falsy_values_disable(value) -> None:
	"""
	Any falsy value disables the logo.
	"""
	toggle = sgl.logo_state.LogoToggle()
	toggle.set_enabled(value)
	assert toggle.is_enabled() is False


#============================================
def test_state_does_not_carry_across_sessions() -> None:
	"""
	A disabled toggle does not affect a new session's toggle.
	"""
	first = sgl.logo_state.LogoToggle()
	first.set_enabled(False)
	second = sgl.logo_state.LogoToggle()
	second.initialize()
	assert second.is_enabled() is True
	assert first.is_enabled() is False


#============================================
def test_coerce_truthy() -> None:
	"""
	The coercion helper returns real booleans.
	"""
	assert sgl.logo_state.coerce_truthy("on") is True
	assert sgl.logo_state.coerce_truthy([]) is False
