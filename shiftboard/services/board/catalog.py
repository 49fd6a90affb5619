"""
Static catalogs the board reads but never mutates: assignable work types,
people available to fill placeholder rows, and the starting roster.
"""

from .types import Person, StaffRow, WorkType


DEFAULT_WORK_TYPES: tuple[WorkType, ...] = (
    WorkType(id="iced-latte", label="Iced Latte", category="bar"),
    WorkType(id="hand-drip", label="Hand Drip", category="bar"),
    WorkType(id="cashier", label="Cashier", category="front"),
    WorkType(id="pastry", label="Pastry", category="kitchen"),
    WorkType(id="cleaning", label="Cleaning", category="support"),
    WorkType(id="delivery", label="Delivery", category="support"),
)

DEFAULT_PEOPLE: tuple[Person, ...] = (
    Person(name="Jackson Wang", avatar="avatars/jackson.jpg", tag="Store Manager"),
    Person(name="Sean Xiao", avatar="avatars/sean.jpg", tag="Full-time"),
    Person(name="Dilraba Dilmurat", avatar="avatars/dilraba.jpg", tag="Part-time"),
    Person(name="Jay Chou", avatar="avatars/jay.jpg", tag="Own Staff"),
    Person(name="Jackson Yee", avatar="avatars/yee.jpg", tag="Own Staff"),
)


def default_roster() -> list[StaffRow]:
    # fresh list every call, the roster takes ownership of it
    return [
        StaffRow(id="s1", name="Lin Mei", avatar="avatars/lin.jpg", tag="Store Manager"),
        StaffRow(id="s2", name="Zhao Lei", avatar="avatars/zhao.jpg", tag="Full-time"),
        StaffRow(id="s3", name="Chen Yu", avatar="avatars/chen.jpg", tag="Part-time"),
        StaffRow(id="s4"),
    ]
