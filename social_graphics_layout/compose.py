"""
Composition of a full layout plan for one template.
"""

# Standard Library
import dataclasses

# local repo modules
import social_graphics_layout as sgl
import social_graphics_layout.area
import social_graphics_layout.config
import social_graphics_layout.elements
import social_graphics_layout.errors
import social_graphics_layout.fit
import social_graphics_layout.logo
import social_graphics_layout.logo_state
import social_graphics_layout.placement
import social_graphics_layout.templates


ContentArea = sgl.config.ContentArea
LayoutPlan = sgl.config.LayoutPlan
PlacedElement = sgl.config.PlacedElement
LogoToggle = sgl.logo_state.LogoToggle
DegenerateElementError = sgl.errors.DegenerateElementError


#============================================
def _placed(role: str, element, left: float, top: float) -> PlacedElement:
	return PlacedElement(
		role=role,
		kind=element.kind,
		left=left,
		top=top,
		width=element.get_scaled_width(),
		height=element.get_scaled_height(),
		scale=sgl.elements.element_scale(element),
		text=getattr(element, "text", ""),
		asset=getattr(element, "source", ""),
	)


#============================================
def place_centered(role: str, element, area: ContentArea, kind: str | None = None) -> PlacedElement:
	"""
	Fit an element into the content area and center it.

	Args:
		role: Role name for the plan.
		element: Placeable element.
		area: Content area.
		kind: Fit ratio key; defaults to the shape name for circles and
			crosses, else the element's kind.

	Returns:
		PlacedElement.
	"""
	sgl.fit.fit_to_area(element, area, kind)
	left = area.x + sgl.placement.compute_center_offset(area.width, element.get_scaled_width())
	top = area.y + sgl.placement.compute_center_offset(area.height, element.get_scaled_height())
	return _placed(role, element, left, top)


#============================================
def _logo_elements(plan: LayoutPlan, logo_text: str) -> list[PlacedElement]:
	descriptor = plan.template
	layout = sgl.logo.compute_logo_layout(descriptor, plan.area, logo_text)
	asset_width = sgl.config.LOGO_ASSET_SIZES[layout.asset][0]
	logo = PlacedElement(
		role="logo",
		kind="bitmap",
		left=sgl.placement.compute_center_offset(descriptor.width, layout.logo_width),
		top=layout.logo_top,
		width=layout.logo_width,
		height=layout.logo_height,
		scale=layout.logo_width / asset_width,
		asset=layout.asset,
		movable_x=False,
		movable_y=False,
	)
	caption = PlacedElement(
		role="logo_caption",
		kind="text",
		left=sgl.placement.compute_center_offset(descriptor.width, layout.caption_width),
		top=layout.caption_top,
		width=layout.caption_width,
		height=layout.caption_height,
		scale=1.0,
		angle=layout.angle,
		text=layout.caption,
		movable_x=False,
		movable_y=False,
	)
	return [logo, caption]


#============================================
def compose_layout(
	template_name: str,
	logo_toggle: LogoToggle,
	logo_text: str | None = None,
	background=None,
	text=None,
	extras: tuple = (),
) -> LayoutPlan | None:
	"""
	Build a layout plan for a template.

	Background first, then the headline text and extra elements, with the
	logo and its caption last so they sit on top. The logo is left out when
	the toggle is disabled or no caption is given. An element whose size is
	degenerate is left out and named in plan.skipped.

	Args:
		template_name: Template identifier.
		logo_toggle: Session logo toggle.
		logo_text: Caption under the logo.
		background: Optional axis-scalable background element.
		text: Optional headline text element.
		extras: Additional elements to fit and center.

	Returns:
		LayoutPlan, or None when the template is unknown.
	"""
	descriptor = sgl.templates.get_template(template_name)
	area = sgl.area.compute_content_area(descriptor)
	if area is None:
		return None

	plan = LayoutPlan(template=descriptor, area=area, logo_enabled=logo_toggle.is_enabled())

	if background is not None:
		try:
			placement = sgl.placement.place_background(background, area, descriptor.width)
		except DegenerateElementError as error:
			plan.skipped.append(f"background: {error}")
		else:
			placed = _placed("background", background, placement.left, placement.top)
			placed.movable_x = placement.movable_x
			placed.movable_y = placement.movable_y
			plan.elements.append(placed)

	pending = []
	if text is not None:
		pending.append(("text", text))
	for index, element in enumerate(extras):
		pending.append((f"extra_{index}", element))
	for role, element in pending:
		try:
			plan.elements.append(place_centered(role, element, area))
		except DegenerateElementError as error:
			plan.skipped.append(f"{role}: {error}")

	if plan.logo_enabled and logo_text:
		plan.elements.extend(_logo_elements(plan, logo_text))
	return plan


#============================================
def plan_to_dict(plan: LayoutPlan) -> dict:
	"""
	Convert a layout plan into JSON-ready data.

	Args:
		plan: Layout plan.

	Returns:
		Dictionary payload.
	"""
	return {
		"template": dataclasses.asdict(plan.template),
		"content_area": dataclasses.asdict(plan.area),
		"logo_enabled": plan.logo_enabled,
		"elements": [dataclasses.asdict(element) for element in plan.elements],
		"skipped": list(plan.skipped),
	}
