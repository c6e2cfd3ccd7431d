import social_graphics_layout as sgl
import social_graphics_layout.area
import social_graphics_layout.config
import social_graphics_layout.templates


#============================================
def _ratio_template(top: float, bottom: float | None = None) -> sgl.config.TemplateDescriptor:
	return sgl.config.TemplateDescriptor(
		name="ratio",
		width=1000,
		height=2000,
		logo_top=0.8,
		logo_text_top=0.9,
		dpi=200,
		top_border_multiplier=top,
		bottom_border_multiplier=bottom,
	)


#============================================
def test_content_area_for_every_template() -> None:
	"""
	Absolute borders inset all four sides equally.
	"""
	for name in sgl.templates.list_template_names():
		descriptor = sgl.templates.get_template(name)
		area = sgl.area.compute_content_area(descriptor)
		assert area is not None, name
		assert area.width == descriptor.width - 2 * descriptor.border
		assert area.height == descriptor.height - 2 * descriptor.border
		assert area.x == descriptor.border
		assert area.y == descriptor.border
		assert area.width > 0
		assert area.height > 0


#============================================
def test_story_content_area() -> None:
	"""
	Story is 1080x1920 with a 10 px border.
	"""
	area = sgl.area.content_area_for("story")
	assert (area.x, area.y, area.width, area.height) == (10, 10, 1060, 1900)
	assert (area.top, area.bottom, area.left, area.right) == (10, 10, 10, 10)


#============================================
def test_missing_or_invalid_descriptor_has_no_area() -> None:
	"""
	None and invalid descriptors return None rather than a zero area.
	"""
	assert sgl.area.compute_content_area(None) is None
	assert sgl.area.content_area_for("nope") is None
	oversized = sgl.config.TemplateDescriptor(
		name="bad", width=100, height=40, logo_top=0.5, logo_text_top=0.9, dpi=72, border=20,
	)
	assert sgl.area.compute_content_area(oversized) is None


#============================================
def test_ratio_border_is_symmetric_by_default() -> None:
	"""
	A single multiplier insets every side by round(multiplier * height).
	"""
	area = sgl.area.compute_content_area(_ratio_template(0.05))
	assert (area.top, area.bottom, area.left, area.right) == (100, 100, 100, 100)
	assert (area.x, area.y) == (100, 100)
	assert area.width == 800
	assert area.height == 1800


#============================================
def test_ratio_border_exposes_asymmetric_insets() -> None:
	"""
	A bottom multiplier yields a separate bottom inset.
	"""
	area = sgl.area.compute_content_area(_ratio_template(0.05, 0.1))
	assert area.top == 100
	assert area.bottom == 200
	assert area.height == 2000 - 100 - 200
	assert area.width == 800


#============================================
def test_ratio_border_consuming_everything_has_no_area() -> None:
	"""
	Ratio insets that leave nothing produce no area.
	"""
	assert sgl.area.compute_content_area(_ratio_template(0.5)) is None
	assert sgl.area.compute_content_area(_ratio_template(1.5)) is None


#============================================
def test_area_is_recomputed_each_call() -> None:
	"""
	Each call returns a fresh, equal area.
	"""
	descriptor = sgl.templates.get_template("post")
	first = sgl.area.compute_content_area(descriptor)
	second = sgl.area.compute_content_area(descriptor)
	assert first == second
	assert first is not second
