"""Command model — a program instruction placed at a memory address."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Command(BaseModel):
    """A read-only assembled instruction.

    Navigation only relies on ``address``; the remaining fields are
    carried through for presentation.
    """

    model_config = ConfigDict(frozen=True)

    address: int = Field(description="Memory address the command occupies")
    mnemonic: str = Field("", description="Instruction mnemonic, e.g. LDC or ADD")
    argument: int | None = Field(None, description="Resolved operand, if any")
    label: str | None = Field(None, description="Label attached to this line")
    line: int | None = Field(None, description="1-based source line number")
    value: int = Field(0, description="Encoded word stored at the address")

    def render(self) -> str:
        """Short ``MNEMONIC arg`` form for display."""
        if self.argument is None:
            return self.mnemonic
        return f"{self.mnemonic} {self.argument}"
