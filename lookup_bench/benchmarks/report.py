from typing import Mapping


def render(size: int, iterations: int, result: Mapping[str, float]) -> str:
    """Format one data size's timings as a text block ending in a blank line."""
    lines = [f"Data size: {size}, Iterations: {iterations}"]
    for kind, elapsed_ms in result.items():
        lines.append(f"{kind}: {elapsed_ms:.4f}ms")
    return "\n".join(lines) + "\n\n"
