"""Quickstart example for spanreport.

This example demonstrates registering sources, building diagnostics with
labels and notes, and rendering them to text, to a terminal, and through a
registry that queues diagnostics for later.

Note: Label offsets are UTF-8 byte offsets. The examples compute them with
bytes.find() on the encoded source, because characters such as "→" and "₁"
are longer than one byte.
"""

from spanreport import (
    ColorChoice,
    Diagnostic,
    DiagnosticFormatter,
    DiagnosticRegistry,
    FilterConfig,
    InMemoryCache,
    Label,
    Level,
    RenderConfig,
    SourceStore,
    Stage,
    TerminalRenderer,
)

FIZZBUZZ = """\
module FizzBuzz where

fizz₁ : Nat → String
fizz₁ num = case (mod num 5) (mod num 3) of
    0 0 => "FizzBuzz"
    0 _ => "Fizz"
    _ 0 => "Buzz"
    _ _ => num
"""


def span(text: str, needle: str, start: int = 0) -> tuple[int, int]:
    """Byte range of the first occurrence of needle at or after byte start."""
    data = text.encode("utf-8")
    found = data.find(needle.encode("utf-8"), start)
    return found, found + len(needle.encode("utf-8"))


sources = SourceStore()
demo = sources.add("demo.fun", "fizz : Nat -> String\n")
fizzbuzz = sources.add("FizzBuzz.fun", FIZZBUZZ)
formatter = DiagnosticFormatter(sources)

# Example 1: One primary label
print("=" * 50)
print("Example 1: Single Label")
print("=" * 50)

diagnostic = (
    Diagnostic.error("type mismatch")
    .with_code(10)
    .with_label(Label.primary(demo, 0, 4, "here"))
)
print(formatter.format(diagnostic))
# Output:
# error[000010]: type mismatch
#   ┌─ demo.fun
# 1 │  fizz : Nat -> String
#   │  ^^^^ here

# Example 2: Primary and secondary labels, multi-line bracket, notes
print("\n" + "=" * 50)
print("Example 2: Multi-line Labels and Notes")
print("=" * 50)

num_start, num_end = span(FIZZBUZZ, "num", span(FIZZBUZZ, "_ _ =>")[1])
case_start, _ = span(FIZZBUZZ, "case")
string_start, string_end = span(FIZZBUZZ, "String")

diagnostic = (
    Diagnostic.error("`case` clauses have incompatible types")
    .with_code(308)
    .with_label(
        Label.primary(fizzbuzz, num_start, num_end, "expected `String`, found `Nat`")
        .with_secondary(string_start, string_end, "expected type `String` found here")
    )
    .with_label(
        Label.secondary(fizzbuzz, case_start, num_end, "`case` clauses have incompatible types")
    )
    .with_note("expected type `String`\n   found type `Nat`")
)
print(formatter.format(diagnostic))

# Example 3: Severity levels
print("\n" + "=" * 50)
print("Example 3: Severity Levels")
print("=" * 50)

print(
    formatter.format_all(
        [
            Diagnostic.bug("internal inconsistency").with_code(1),
            Diagnostic.warning("unused variable `num`"),
            Diagnostic.note("checked 1 module"),
            Diagnostic.help("run with --explain 308 for details"),
        ]
    )
)
# Output:
#   bug[000001]: internal inconsistency
#
#  warn: unused variable `num`
#
#  note: checked 1 module
#
#  help: run with --explain 308 for details

# Example 4: ASCII glyphs
print("\n" + "=" * 50)
print("Example 4: ASCII Output")
print("=" * 50)

ascii_formatter = DiagnosticFormatter(sources, RenderConfig(ascii=True))
print(ascii_formatter.format(Diagnostic.warning("shadowed name").with_label(
    Label.tertiary(demo, 0, 4, "declared here")
)))
# Output:
#  warn: shadowed name
#   --> demo.fun
# 1 |  fizz : Nat -> String
#   |  ~~~~ declared here

# Example 5: Registry with an in-memory cache
print("\n" + "=" * 50)
print("Example 5: Queued Diagnostics")
print("=" * 50)

cache = InMemoryCache(max_length=100, filter_config=FilterConfig(level=Level.WARNING))
registry = DiagnosticRegistry(cache)
stage = Stage.semantic("FizzBuzz")

registry.error(stage, lambda: Diagnostic.error("unknown type `Nut`"))
registry.diagnostic(stage, Level.NOTE, lambda: Diagnostic.note("filtered out, never built"))
registry.warn(stage, lambda: Diagnostic.warning("redundant pattern"))

for entry in cache.drain():
    print(f"[{entry.stage}] {formatter.format(entry.diagnostic)}")
# Output:
# [semantic(FizzBuzz)] error: unknown type `Nut`
# [semantic(FizzBuzz)]  warn: redundant pattern

# Example 6: Terminal output (colored when stdout is a TTY and NO_COLOR is unset)
print("\n" + "=" * 50)
print("Example 6: Terminal Renderer")
print("=" * 50)

TerminalRenderer(config=RenderConfig(color=ColorChoice.AUTO)).render(sources, diagnostic)

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
