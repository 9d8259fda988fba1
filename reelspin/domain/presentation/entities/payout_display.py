# reelspin/domain/presentation/entities/payout_display.py
from dataclasses import dataclass
from typing import Optional, Tuple


def format_payout(amount: float) -> str:
    return f"wins ${amount:.2f}"


@dataclass
class Bounds:
    x: float
    y: float
    width: float
    height: float


@dataclass
class WinningSymbolBadge:
    """Large copy of the winning symbol shown next to the payout message."""
    position: Tuple[float, float]
    size: float
    symbol: Optional[str] = None
    visible: bool = False

    @property
    def bounds(self) -> Bounds:
        return Bounds(self.position[0], self.position[1], self.size, self.size)

    def show(self, symbol: str):
        self.symbol = symbol
        self.visible = True

    def hide(self):
        self.visible = False


@dataclass
class PayoutMessage:
    """
    Text telling the player what the spin paid.

    Text and visibility are separate: a hidden message may still hold the
    previous text until ``clear`` runs.
    """
    offset: float = 30
    text: str = ""
    visible: bool = False
    position: Tuple[float, float] = (0.0, 0.0)

    def show(self, amount: float, anchor: Bounds):
        self.text = format_payout(amount)
        self.position = (anchor.x + anchor.width + self.offset, anchor.y + anchor.height / 2.5)
        self.visible = True

    def clear(self):
        self.visible = False
        self.text = ""
