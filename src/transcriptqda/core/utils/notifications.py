"""
User notification utilities for transcriptqda.

Console output goes through a shared rich ``Console`` and respects the
configured mode: technical messages only appear in 'advanced' mode.
"""

from rich.console import Console
from rich.style import Style

console = Console()

# Track the current module to print section breaks only when starting a new module
_current_module: str | None = None

MODULE_COLOR_MAP = {
    "load": "cyan",
    "word_frequency": "blue",
    "wordclouds": "bright_magenta",
    "sentiment": "yellow",
    "topic_modeling": "#ffd700",  # gold
    "default": "white",
}

MODULE_EMOJI_MAP = {
    "load": "📂",
    "word_frequency": "📊",
    "wordclouds": "💬",
    "sentiment": "😊",
    "topic_modeling": "💡",
    "default": "⚙️",
}


def strip_emojis(text: str) -> str:
    """Remove the module emojis and check marks used in console messages."""
    for emoji in list(MODULE_EMOJI_MAP.values()) + ["✅", "❌", "⚠️", "🔍"]:
        text = text.replace(emoji, "")
    return " ".join(text.split())


def _console_prefs() -> tuple[str, bool]:
    from transcriptqda.core.utils.config import get_config

    config = get_config()
    return getattr(config, "mode", "simple"), getattr(config, "use_emojis", True)


def print_section_break(module: str | None = "default", force: bool = False) -> None:
    """
    Print a colored section break when a new module starts.

    Args:
        module: Module name to determine color
        force: If True, print section break even if it's the same module
    """
    global _current_module

    if not force and module == _current_module:
        return

    _, use_emojis = _console_prefs()
    module_key = module if module else "default"
    color = MODULE_COLOR_MAP.get(module_key, MODULE_COLOR_MAP["default"])

    console.print()
    console.print("─" * 60, style=Style(color=color))
    if module and module != "default":
        emoji = ""
        if use_emojis:
            emoji = MODULE_EMOJI_MAP.get(module_key, MODULE_EMOJI_MAP["default"]) + " "
        module_display = module.upper().replace("_", " ")
        console.print(f"{emoji}{module_display}", style=Style(color=color, bold=True))
        console.print("─" * 60, style=Style(color=color))
        _current_module = module


def notify_user(
    msg: str, level: str = "info", technical: bool = False, section: str | None = None
) -> None:
    """
    Print a user notification based on the configured mode.

    Args:
        msg: Message to display to the user
        level: "info", "warning" or "error"; warnings and errors are coloured
        technical: If True, message is only shown in advanced mode
        section: Optional module name for colored section break

    Usage:
        notify_user("Running sentiment scoring...", section="sentiment")
        notify_user("Vocabulary has 412 terms", technical=True)
    """
    mode, use_emojis = _console_prefs()

    if mode == "simple" and technical:
        return

    if section and "Running" in msg:
        print_section_break(section)

    display_msg = msg if use_emojis else strip_emojis(msg)

    if level == "error":
        console.print(display_msg, style="bold red")
    elif level == "warning":
        console.print(display_msg, style="yellow")
    else:
        console.print(display_msg)

    if section and ("Completed" in msg or "✅" in msg):
        console.print()
