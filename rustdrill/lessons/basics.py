"""Small worked problems: prices, branching, strings, lists and optional values."""

from __future__ import annotations

from dataclasses import dataclass

BULK_THRESHOLD = 40
REGULAR_APPLE_PRICE = 2
COLOR_WORDS = frozenset({"green", "blue", "red"})
HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def calculate_price_of_apples(apples: int) -> int:
    """Price of an order: 2 each, or 1 each when more than 40 are bought."""
    if apples > BULK_THRESHOLD:
        return apples
    return apples * REGULAR_APPLE_PRICE


@dataclass(frozen=True)
class Uppercase:
    """Turn the text into upper case."""


@dataclass(frozen=True)
class Trim:
    """Strip whitespace from both ends of the text."""


@dataclass(frozen=True)
class Append:
    """Append "bar" to the text the given number of times."""

    count: int


Command = Uppercase | Trim | Append


def transformer(items: list[tuple[str, Command]]) -> list[str]:
    """Apply each command to its text and return the results in order."""
    output = []
    for text, command in items:
        match command:
            case Uppercase():
                output.append(text.upper())
            case Trim():
                output.append(text.strip())
            case Append(count=count):
                output.append(text + "bar" * count)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


@dataclass
class ReportCard:
    """A student's report card; the grade may be a number or a letter."""

    grade: float | str
    student_name: str
    student_age: int

    def __str__(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    if a > b:
        return a
    return b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Where the animal lives, or "Unknown"."""
    return HABITATS.get(animal, "Unknown")


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Sale price: 10 off an even price, 3 off an odd one."""
    if is_even(price):
        return price - 10
    return price - 3


def square(num: int) -> int:
    """The number multiplied by itself."""
    return num * num


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """A new list holding every element doubled."""
    return [value * 2 for value in values]


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colours."""
    return attempt in COLOR_WORDS


def trim_me(text: str) -> str:
    """The text without surrounding whitespace."""
    return text.strip()


def compose_me(text: str) -> str:
    """The text followed by " world!"."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """The text with every "cars" replaced by "balloons"."""
    return text.replace("cars", "balloons")


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice creams left at the given hour: 5 before 22, then 0; None from 25 on."""
    if time_of_day < 22:
        return 5
    if time_of_day >= 25:
        return None
    return 0