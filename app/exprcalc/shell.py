"""
Host Shell

The interactive front end: a two-option menu (compute / exit) that
reads an expression, hands it to the CalculatorService and prints
the result or the error.

Usage:
    python app/run_calculator.py
    exprcalc
"""

from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .config import CalculatorConfig, load_config
from .logging_config import get_logger, setup_logging_from_config
from .service import CalculatorService

logger = get_logger("shell")

CHOICE_COMPUTE = "1"
CHOICE_EXIT = "2"

BANNER = """\
Operations: +, -, *, /, // (floor division), ** or ^ (power)
Functions:  log() (base 2), exp(), ! (factorial)
Example:    -3234+((exp(2)*843/log(3234)-4232123)/(34+123+32+5))*3234"""


class CalculatorShell:
    """
    Menu loop around the calculator service.

    Input and output are injectable so the loop can be driven
    from tests without a terminal.
    """

    def __init__(
        self,
        service: Optional[CalculatorService] = None,
        config: Optional[CalculatorConfig] = None,
        console: Optional[Console] = None,
        input_func: Optional[Callable[[str], str]] = None,
    ):
        self.config = config or (service.config if service else load_config())
        self.service = service or CalculatorService(self.config)
        self.console = console or Console()
        self.input_func = input_func or self.console.input

    def show_banner(self) -> None:
        self.console.print(Panel(
            escape(BANNER),
            title="[bold]Expression Calculator[/bold]",
            border_style="blue",
        ))

    def show_menu(self) -> None:
        self.console.print()
        self.console.print(f"{CHOICE_COMPUTE}. Evaluate an expression")
        self.console.print(f"{CHOICE_EXIT}. Exit")

    def calculate(self) -> None:
        """Read one expression and print its value or error."""
        expression = self.input_func("Enter a math expression: ")
        result = self.service.evaluate(expression)
        if result.success:
            self.console.print(f"[bold green]Result:[/bold green] {result.value}")
        else:
            self.console.print(f"[red]Error: {escape(result.error or '')}[/red]")

    def run(self) -> None:
        """
        Run the menu loop until the user exits.

        End of input and Ctrl+C also end the loop.
        """
        if self.config.show_banner:
            self.show_banner()

        logger.debug("Shell started")
        try:
            while True:
                self.show_menu()
                choice = self.input_func("Choose an action: ").strip()

                if choice == CHOICE_COMPUTE:
                    self.calculate()
                elif choice == CHOICE_EXIT:
                    break
                else:
                    self.console.print("[yellow]Invalid choice![/yellow]")
        except (EOFError, KeyboardInterrupt):
            self.console.print()
        logger.debug("Shell stopped")
        self.console.print("Goodbye!")


# === Command Line Interface ===

def main() -> None:
    """Console entry point."""
    config = load_config()
    setup_logging_from_config(config)
    CalculatorShell(config=config).run()


if __name__ == "__main__":
    main()
