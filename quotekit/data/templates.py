"""Starter quote templates by trade.

Each template carries typical line items at common rates plus the payment,
warranty and disclaimer terms a provider would otherwise retype on every
quote.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from quotekit.models.line_items import (
    FixedLineItem,
    HourlyLineItem,
    LineItem,
    MaterialLineItem,
    SquareFootLineItem,
)


class QuoteTemplate(BaseModel):
    """A named starter set of line items and terms."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    key: str
    name: str
    description: str
    default_line_items: list[LineItem] = Field(default_factory=list)
    terms: str = ""


class TemplateSummary(BaseModel):
    """What a template picker lists before one is chosen."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    description: str


DEFAULT_TEMPLATE_KEY = "handyman"

# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

QUOTE_TEMPLATES: list[QuoteTemplate] = [
    QuoteTemplate(
        key="handyman",
        name="Standard Handyman Quote",
        description="General handyman services quote template",
        default_line_items=[
            HourlyLineItem(
                name="Labor",
                description="Standard hourly labor rate",
                hours=1,
                rate=75,
            ),
            FixedLineItem(
                name="Travel Fee",
                description="One-time travel charge",
                price=25,
            ),
        ],
        terms="""Payment Terms:
- 50% deposit required to schedule
- Final payment due upon completion
- Accepted payment methods: Cash, Check, Credit Card

Warranty:
- 90-day workmanship warranty
- Materials covered by manufacturer warranty

Disclaimer:
- Quote valid for 30 days
- Prices subject to change if scope changes
- Client responsible for permit fees if required""",
    ),
    QuoteTemplate(
        key="electrical",
        name="Electrical Work Quote",
        description="Licensed electrical services",
        default_line_items=[
            HourlyLineItem(
                name="Electrical Labor",
                description="Licensed electrician hourly rate",
                hours=1,
                rate=125,
            ),
            MaterialLineItem(
                name="Materials",
                description="Electrical supplies and materials",
                quantity=1,
                unit_price=50,
            ),
            FixedLineItem(
                name="Permit Fee",
                description="Municipal electrical permit",
                price=150,
            ),
        ],
        terms="""Payment Terms:
- 50% deposit required
- Final payment upon inspection approval

Licensing & Permits:
- Work performed by licensed electrician
- All work meets NEC code requirements
- Required permits included in quote

Warranty:
- 1-year workmanship warranty
- Materials warranted per manufacturer

Safety Notice:
- Power shut-off required during work
- Final inspection by local authority""",
    ),
    QuoteTemplate(
        key="assembly",
        name="Furniture Assembly Quote",
        description="Furniture assembly services",
        default_line_items=[
            FixedLineItem(
                name="Assembly Labor",
                description="Per item assembly",
                price=80,
            ),
            FixedLineItem(
                name="Additional Items",
                description="Each additional item",
                price=40,
            ),
        ],
        terms="""Payment Terms:
- Payment due upon completion
- Cash, Venmo, or Credit Card accepted

Service Details:
- Assembly of customer-provided furniture
- Hardware and tools provided
- Cleanup of packaging materials included

Disclaimer:
- Quote valid for 14 days
- Client responsible for verifying all parts present
- Damage to pre-assembled items not covered""",
    ),
    QuoteTemplate(
        key="painting",
        name="Painting Quote",
        description="Interior/exterior painting services",
        default_line_items=[
            SquareFootLineItem(
                name="Surface Preparation",
                description="Cleaning, sanding, priming",
                square_feet=100,
                rate_per_sqft="0.5",
            ),
            SquareFootLineItem(
                name="Paint Application",
                description="2 coats premium paint",
                square_feet=100,
                rate_per_sqft="1.5",
            ),
            MaterialLineItem(
                name="Paint & Materials",
                description="Premium interior paint",
                quantity=2,
                unit_price=45,
            ),
        ],
        terms="""Payment Terms:
- 30% deposit upon acceptance
- 40% at project midpoint
- 30% upon completion

Surface Preparation:
- Light sanding and cleaning included
- Major repairs quoted separately
- Furniture moving by client

Paint Details:
- Premium quality paint
- 2 coats minimum
- Trim and doors included

Timeline:
- Weather dependent for exterior
- Estimated completion: [X] days""",
    ),
    QuoteTemplate(
        key="plumbing",
        name="Plumbing Services Quote",
        description="Licensed plumbing services",
        default_line_items=[
            HourlyLineItem(
                name="Plumbing Labor",
                description="Licensed plumber hourly rate",
                hours=1,
                rate=95,
            ),
            FixedLineItem(
                name="Service Call Fee",
                description="Trip charge and diagnosis",
                price=75,
            ),
            MaterialLineItem(
                name="Parts & Materials",
                description="Plumbing fixtures and supplies",
                quantity=1,
                unit_price=100,
            ),
        ],
        terms="""Payment Terms:
- Service call fee due at start
- Final payment upon completion

Licensing:
- Work performed by licensed plumber
- Meets local plumbing codes
- Permits obtained as required

Warranty:
- 90-day labor warranty
- Parts warranted per manufacturer

Important:
- Water shut-off may be required
- Access to work area must be clear
- Final inspection if required by code""",
    ),
    QuoteTemplate(
        key="hvac",
        name="HVAC Services Quote",
        description="Heating and cooling services",
        default_line_items=[
            HourlyLineItem(
                name="HVAC Labor",
                description="Certified HVAC technician",
                hours=1,
                rate=110,
            ),
            FixedLineItem(
                name="Diagnostic Fee",
                description="System inspection and diagnosis",
                price=95,
            ),
            MaterialLineItem(
                name="Parts",
                description="HVAC components and materials",
                quantity=1,
                unit_price=150,
            ),
        ],
        terms="""Payment Terms:
- Diagnostic fee due at service start
- Final payment upon completion

Service Details:
- Performed by certified technician
- EPA-certified refrigerant handling
- System testing after service

Warranty:
- 1-year labor warranty
- Parts warranty per manufacturer

Notice:
- System may be offline during service
- Filter replacement recommended
- Annual maintenance recommended""",
    ),
]
