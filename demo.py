#!/usr/bin/env python3
"""jsonbytes Demo - Show the three byte encodings side by side."""

from pydantic import BaseModel
from rich import box
from rich.console import Console
from rich.table import Table

from jsonbytes import (
    Bytes,
    FixedBytes,
    FormatError,
    dumps,
    get_encoding,
    list_encodings,
    loads,
    use_encoder,
)


class Digest(FixedBytes):
    """Eight byte digest."""

    size = 8


class Message(BaseModel):
    """Example document with byte fields."""

    count: int
    data: Bytes
    digest: Digest


def demo_encodings(console: Console) -> None:
    """Render the same bytes with each registered encoding."""
    console.print("\n=== jsonbytes Demo: Encodings ===")

    samples = [b"", b"foo", b"D!.3s", b"\x0f\x8f\xda\xfb\xed", bytes(range(16))]
    table = Table(title="Byte encodings", box=box.SIMPLE_HEAVY)
    table.add_column("Input")
    for name in list_encodings():
        table.add_column(name)

    for sample in samples:
        row = [repr(sample)]
        for name in list_encodings():
            row.append(get_encoding(name).marshal(sample))
        table.add_row(*row)
    console.print(table)


def demo_documents(console: Console) -> None:
    """Serialize a pydantic model under each encoding."""
    console.print("\n=== jsonbytes Demo: Documents ===")

    message = Message(count=15, data=Bytes(b"D!.3s"), digest=Digest(bytes(range(8))))
    for name in list_encodings():
        with use_encoder(name):
            text = dumps(message)
            assert loads(text, Message) == message
        console.print(f"   {name:>10}: {text}")


def demo_errors(console: Console) -> None:
    """Show rejected input."""
    console.print("\n=== jsonbytes Demo: Rejected input ===")

    cases = [
        ("hex", "0123"),
        ("hex", '"abc"'),
        ("hex", '"dewq12"'),
        ("base64", '"D4/a++1="'),
        ("base64", '"abc"'),
        ("raw-base64", '"abc="'),
    ]
    for name, literal in cases:
        try:
            get_encoding(name).unmarshal(literal)
        except FormatError as e:
            console.print(f"   {name:>10} {literal:<12} [red]{e}[/red]")

    digest = Digest(bytes(range(8)))
    try:
        digest.load_json('"food"', "hex")
    except FormatError as e:
        console.print(f"   failed load kept {digest!r}: [red]{e}[/red]")


def main() -> None:
    """Run all demos."""
    console = Console()
    demo_encodings(console)
    demo_documents(console)
    demo_errors(console)


if __name__ == "__main__":
    main()
