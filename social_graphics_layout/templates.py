"""
Template registry for output formats.
"""

# local repo modules
import social_graphics_layout as sgl
import social_graphics_layout.config


TemplateDescriptor = sgl.config.TemplateDescriptor


#============================================
def _template(
	name: str,
	width: int,
	height: int,
	border: int,
	logo_top: float,
	logo_text_top: float,
	dpi: int,
) -> TemplateDescriptor:
	return TemplateDescriptor(
		name=name,
		width=width,
		height=height,
		border=border,
		logo_top=logo_top,
		logo_text_top=logo_text_top,
		dpi=dpi,
	)


# insertion order is the order shown to users
TEMPLATES: dict[str, TemplateDescriptor] = {
	descriptor.name: descriptor
	for descriptor in (
		_template("story", 1080, 1920, 10, 0.83, 0.9423, 200),
		_template("post", 1080, 1080, 20, 0.79, 0.948, 200),
		_template("post_45", 1080, 1350, 20, 0.815, 0.959, 200),
		_template("event", 1200, 628, 20, 0.678, 0.9, 200),
		_template("facebook_header", 1958, 745, 20, 0.6, 0.872, 150),
		_template("a2", 4961, 7016, 10, 0.804, 0.929, 150),
		_template("a2_quer", 7016, 4961, 10, 0.694, 0.856, 150),
		_template("a3", 3508, 4961, 10, 0.804, 0.929, 200),
		_template("a3_quer", 4961, 3508, 10, 0.694, 0.856, 200),
		_template("a4", 2480, 3508, 10, 0.804, 0.929, 250),
		_template("a4_quer", 3508, 2480, 10, 0.694, 0.856, 250),
		_template("a5", 1748, 2480, 10, 0.804, 0.929, 300),
		_template("a5_quer", 2480, 1748, 10, 0.694, 0.856, 300),
	)
}


#============================================
def get_template(name: str) -> TemplateDescriptor | None:
	"""
	Look up a template by name.

	Unknown, empty or non-string names return None. Callers pick their
	own fallback; no default template is guessed here.

	Args:
		name: Template identifier such as "story" or "a4_quer".

	Returns:
		TemplateDescriptor or None when not found.
	"""
	if not isinstance(name, str) or not name:
		return None
	return TEMPLATES.get(name)


#============================================
def list_template_names() -> list[str]:
	"""
	List registered template names in registry order.

	Returns:
		List of template names.
	"""
	return list(TEMPLATES)


#============================================
def _is_ratio(value) -> bool:
	return isinstance(value, (int, float)) and 0.0 <= value <= 1.0


#============================================
def check_descriptor(descriptor: TemplateDescriptor) -> list[str]:
	"""
	Check a descriptor against the template invariants.

	Args:
		descriptor: Template descriptor to check.

	Returns:
		List of problem descriptions, empty when the descriptor is valid.
	"""
	problems = []
	if descriptor.width is None or descriptor.width <= 0:
		problems.append(f"width must be positive, got {descriptor.width}")
	if descriptor.height is None or descriptor.height <= 0:
		problems.append(f"height must be positive, got {descriptor.height}")
	if descriptor.dpi is None or descriptor.dpi <= 0:
		problems.append(f"dpi must be positive, got {descriptor.dpi}")
	for field_name in ("logo_top", "logo_text_top"):
		value = getattr(descriptor, field_name)
		if not _is_ratio(value):
			problems.append(f"{field_name} must be within [0, 1], got {value}")
	if problems:
		return problems

	if descriptor.border is not None:
		if descriptor.border < 0:
			problems.append(f"border must be non-negative, got {descriptor.border}")
		elif descriptor.border * 2 >= min(descriptor.width, descriptor.height):
			problems.append(
				f"border {descriptor.border} leaves no content area in "
				f"{descriptor.width}x{descriptor.height}"
			)
		return problems

	if descriptor.top_border_multiplier is None:
		problems.append("either border or top_border_multiplier is required")
		return problems
	for field_name in ("top_border_multiplier", "bottom_border_multiplier"):
		value = getattr(descriptor, field_name)
		if value is not None and not _is_ratio(value):
			problems.append(f"{field_name} must be within [0, 1], got {value}")
	return problems


#============================================
def is_landscape(descriptor: TemplateDescriptor) -> bool:
	"""
	Report whether a template is wider than tall.

	Args:
		descriptor: Template descriptor.

	Returns:
		True for landscape formats.
	"""
	return descriptor.width > descriptor.height


#============================================
def physical_size_inches(descriptor: TemplateDescriptor) -> tuple[float, float]:
	"""
	Compute the printed size of a template at its DPI.

	Args:
		descriptor: Template descriptor.

	Returns:
		Tuple of (width_inches, height_inches).
	"""
	width = sgl.config.pixels_to_inches(descriptor.width, descriptor.dpi)
	height = sgl.config.pixels_to_inches(descriptor.height, descriptor.dpi)
	return (width, height)
