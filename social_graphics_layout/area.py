"""
Content-area calculation for templates.
"""

# local repo modules
import social_graphics_layout as sgl
import social_graphics_layout.config
import social_graphics_layout.templates


TemplateDescriptor = sgl.config.TemplateDescriptor
ContentArea = sgl.config.ContentArea


#============================================
def compute_insets(descriptor: TemplateDescriptor) -> tuple[float, float, float, float]:
	"""
	Compute the border insets of a template.

	Absolute borders inset all four sides equally. Ratio borders use
	round(multiplier * height) for the top, the bottom multiplier when the
	template defines one (else the top inset), and the top inset for the
	left and right sides.

	Args:
		descriptor: Valid template descriptor.

	Returns:
		Tuple of (top, bottom, left, right).
	"""
	if descriptor.border is not None:
		border = descriptor.border
		return (border, border, border, border)
	top = round(descriptor.top_border_multiplier * descriptor.height)
	bottom = top
	if descriptor.bottom_border_multiplier is not None:
		bottom = round(descriptor.bottom_border_multiplier * descriptor.height)
	return (top, bottom, top, top)


#============================================
def compute_content_area(descriptor: TemplateDescriptor | None) -> ContentArea | None:
	"""
	Compute the usable rectangle inside a template's border.

	Always recomputed from the descriptor. Returns None instead of a
	zero-sized area when the descriptor is missing or invalid.

	Args:
		descriptor: Template descriptor or None.

	Returns:
		ContentArea or None.
	"""
	if descriptor is None:
		return None
	if sgl.templates.check_descriptor(descriptor):
		return None

	top, bottom, left, right = compute_insets(descriptor)
	width = descriptor.width - left - right
	height = descriptor.height - top - bottom
	if width <= 0 or height <= 0:
		return None
	return ContentArea(
		x=left,
		y=top,
		width=width,
		height=height,
		top=top,
		bottom=bottom,
		left=left,
		right=right,
	)


#============================================
def content_area_for(name: str) -> ContentArea | None:
	"""
	Resolve a template name and compute its content area.

	Args:
		name: Template identifier.

	Returns:
		ContentArea or None for unknown templates.
	"""
	return compute_content_area(sgl.templates.get_template(name))
