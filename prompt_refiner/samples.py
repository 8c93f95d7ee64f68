"""
Bundled sample requests.

Each sample is a typed-text request that exercises a different mix of
extractors: platform and payment features, a technology stack with an
explicit feature list, and actor-driven interactions.
"""

from dataclasses import dataclass
from typing import List

from .ingest import RawInput


@dataclass(frozen=True)
class Sample:
    """A named sample request."""
    id: int
    title: str
    text: str

    def to_raw_inputs(self) -> List[RawInput]:
        return [RawInput(type="text", content=self.text)]


SAMPLES = (
    Sample(
        id=1,
        title="E-Commerce Mobile App",
        text=(
            "I want to build a mobile e-commerce app for iOS and Android. "
            "Users should be able to browse products, add items to cart, and checkout securely. "
            "The app must support payment via credit cards and PayPal. "
            "It should have a modern, minimalist design with a blue and white color scheme."
        ),
    ),
    Sample(
        id=2,
        title="Task Management Web Application",
        text=(
            "Create a web-based task management system using React and Node.js. "
            "Features include: creating tasks, assigning to team members, setting deadlines, "
            "and tracking progress. Must be responsive and work on all browsers."
        ),
    ),
    Sample(
        id=3,
        title="Restaurant Booking System",
        text=(
            "Design a restaurant reservation system. "
            "Customers can book tables online, view menu, and receive confirmation emails. "
            "Restaurant staff can manage reservations and view bookings calendar."
        ),
    ),
)


def get_sample(sample_id: int) -> Sample:
    """
    Look up a sample by id.

    Raises:
        KeyError: If no sample has that id
    """
    for sample in SAMPLES:
        if sample.id == sample_id:
            return sample
    raise KeyError(f"Unknown sample: {sample_id}. Available: {[s.id for s in SAMPLES]}")
