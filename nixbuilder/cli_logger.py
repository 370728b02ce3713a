import datetime
import sys
import traceback
import os
from colorama import Fore, Style, init

# Initialize Colorama
init(autoreset=True)

LOG_DIR = os.path.join(os.path.expanduser("~"), ".nixbuilder", "logs")
os.makedirs(LOG_DIR, exist_ok=True)

class Logger:
    def __init__(self):
        self.log_file = os.path.join(
            LOG_DIR,
            f"nixbuilder_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        )

    def _get_timestamp(self):
        return datetime.datetime.now().strftime("%H:%M:%S")

    def _log(self, level, message, color, to_stderr=False, prefix="", show_timestamp=True):
        # Looked up per call so redirected streams (e.g. click's CliRunner) are honoured.
        stream = sys.stderr if to_stderr else sys.stdout
        if show_timestamp:
            timestamp = self._get_timestamp()
            log_message = f"[{timestamp}] [{level}] {prefix}{message}\n"
            print(f"{color}{Style.BRIGHT}[{timestamp}]{Style.RESET_ALL} {prefix}{message}{Style.RESET_ALL}", file=stream)
        else:
            log_message = f"[{level}] {prefix}{message}\n"
            print(f"{color}{prefix}{message}{Style.RESET_ALL}", file=stream)

        with open(self.log_file, "a") as f:
            f.write(log_message)

    def info(self, message):
        self._log("INFO", message, Fore.CYAN)

    def phase(self, message):
        """Announce the start of a pipeline phase, e.g. ``=== Detecting ===``."""
        self._log("PHASE", f"=== {message} ===", Fore.MAGENTA, show_timestamp=False)

    def step_info(self, message, indent=2):
        prefix = " " * indent
        self._log("STEP", f"-> {message}", Fore.CYAN, prefix=prefix, show_timestamp=False)

    def output(self, line, indent=4):
        """Echo a line of child process output without decoration."""
        prefix = " " * indent
        self._log("OUTPUT", line.rstrip("\n"), Style.DIM, prefix=prefix, show_timestamp=False)

    def success(self, message):
        self._log("SUCCESS", message, Fore.GREEN, prefix=f"{Style.BRIGHT}✓ {Style.RESET_ALL}{Fore.GREEN}")

    def warning(self, message):
        self._log("WARNING", message, Fore.YELLOW, to_stderr=True,
                  prefix=f"{Style.BRIGHT}⚠ {Style.RESET_ALL}{Fore.YELLOW}")

    def error(self, message):
        self._log("ERROR", message, Fore.RED, to_stderr=True,
                  prefix=f"{Style.BRIGHT}✖ {Style.RESET_ALL}{Fore.RED}")

    def debug(self, message):
        self._log("DEBUG", message, Fore.WHITE + Style.DIM)

    # -------- Exception logging --------
    def exception(self, exc_type, exc_value, exc_traceback):
        """Write the traceback of an exception to the log file only."""
        formatted_lines = traceback.format_exception(exc_type, exc_value, exc_traceback)
        with open(self.log_file, "a") as f:
            for line in formatted_lines:
                for sub_line in line.splitlines():
                    if sub_line.strip():
                        f.write(f"[TRACEBACK] >> {sub_line}\n")


# ---------------- Helper ----------------
logger = Logger()

def get_latest_log_file():
    """Return the path to the latest log file."""
    log_files = [os.path.join(LOG_DIR, f) for f in os.listdir(LOG_DIR) if f.endswith(".log")]
    if not log_files:
        return None
    return max(log_files, key=os.path.getctime)
