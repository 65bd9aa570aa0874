import sys
import time
import threading

class UI:
    def __init__(self, color: bool = True, verbose: bool = False, animate: bool = None):
        self.__HEADING_COLOR = '\033[92m'  # Bright green
        self.__CONTENT_COLOR = '\033[94m'  # Bright blue
        self.__ERROR_COLOR = '\033[91m'    # Bright red
        self.__RESET_COLOR = '\033[0m'     # Reset
        self.__color = color
        self.__verbose = verbose
        # Typewriter banner and spinner only make sense on a terminal
        self.__animate = sys.stdout.isatty() if animate is None else animate
        self.__BANNER = r"""
 ╔════════════════════════════════════════╗
 ║     Welcome to CSV Data Shell!         ║
 ╚════════════════════════════════════════╝
"""
        self.__QUICK_START = [
            " A simple tool for analyzing CSV files",
            "",
            "Quick Start:",
            "  1. Load a file:    load mydata.csv",
            "  2. View data:      show",
            "  3. Filter rows:    filter age > 25",
            "  4. Sort data:      sort name",
            "  5. Save results:   save output.csv",
            "",
            "Type 'help' to see all commands",
            "Type 'exit' to quit",
            "",
        ]
        self.__spinner = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']

    def display_logo(self):
        """Display the welcome banner, typed out when attached to a terminal."""
        for line in self.__BANNER.split('\n'):
            if not self.__animate:
                self.print_colored(line, "green")
                continue
            current_line = ""
            for char in line:
                current_line += char
                sys.stdout.write(f"\r{self.__paint(current_line, self.__HEADING_COLOR)}")
                sys.stdout.flush()
                time.sleep(0.001)
            sys.stdout.write("\n")
            sys.stdout.flush()
        for line in self.__QUICK_START:
            self.print_colored(line, "blue")

    def end_line(self):
        """Finish the current terminal line, e.g. after a prompt left open by Ctrl-D."""
        print()

    def display_goodbye(self):
        self.end_line()
        self.print_colored("Thanks for using CSV Data Shell!", "green")
        self.print_colored("Goodbye!", "green")

    def animate_loading(self, stop_event, message="Processing"):
        """Display a Braille spinner animation."""
        idx = 0
        while not stop_event.is_set():
            sys.stdout.write(f"\r{self.__paint(f'{message} {self.__spinner[idx]}', self.__HEADING_COLOR)}")
            sys.stdout.flush()
            idx = (idx + 1) % len(self.__spinner)
            time.sleep(0.1)
        sys.stdout.write(f"\r{self.__paint(f'{message} Done!', self.__HEADING_COLOR)}\n")
        sys.stdout.flush()

    def start_spinner(self, message):
        """Start the spinner in a helper thread. Returns a stop callable, or None off a terminal."""
        if not self.__animate:
            return None
        stop_animation = threading.Event()
        animation_thread = threading.Thread(target=self.animate_loading, args=(stop_animation, message), daemon=True)
        animation_thread.start()

        def stop():
            stop_animation.set()
            animation_thread.join()
        return stop

    def print_colored(self, text, color, file=None):
        """Print text in the specified color."""
        if color == "green":
            text = self.__paint(text, self.__HEADING_COLOR)
        elif color == "blue":
            text = self.__paint(text, self.__CONTENT_COLOR)
        elif color == "red":
            text = self.__paint(text, self.__ERROR_COLOR)
        print(text, file=file if file is not None else sys.stdout)

    def error(self, text):
        """Print a diagnostic in red on stderr."""
        self.print_colored(text, "red", file=sys.stderr)

    def debug(self, text):
        if self.__verbose:
            self.print_colored(f"Debug: {text}", "blue", file=sys.stderr)

    def __paint(self, text, code):
        if not self.__color:
            return text
        return f"{code}{text}{self.__RESET_COLOR}"
