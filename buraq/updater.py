"""Applies a downloaded update package and relaunches the application."""

from __future__ import annotations

import subprocess
import sys
import time
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, TextIO

import psutil

from .api import db_log


@dataclass
class ProgressReport:
    """State of the update progress display: status, log, progress and outcome."""

    stream: TextIO | None = None
    title: str = "Updating Application..."
    status_text: str = "Initializing update..."
    log: list[str] = field(default_factory=list)
    progress: int = 0
    progress_history: list[int] = field(default_factory=list)
    finish_button_visible: bool = False
    finished: bool | None = None
    accepted: bool = False

    def set_status_text(self, text: str) -> None:
        """Show a new status line."""
        self.status_text = text
        if self.stream is not None:
            print(f"== {text}", file=self.stream)

    def add_log_message(self, message: str) -> None:
        """Append a message to the log."""
        self.log.append(message)
        if self.stream is not None:
            print(message, file=self.stream)

    def set_progress(self, percentage: int) -> None:
        """Set the progress in percent."""
        self.progress = percentage
        self.progress_history.append(percentage)

    def on_update_finished(self, success: bool, final_message: str) -> None:
        """Record the outcome of the update."""
        self.finished = success
        self.title = "Update Complete" if success else "Update Failed"
        self.set_status_text(final_message)
        if success:
            self.progress = 100
        else:
            self.finish_button_visible = True

    def on_restart(self) -> None:
        """Close the display once the application has been relaunched."""
        self.accepted = True


class UpdateWorker:
    """Runs the update steps and reports to a ProgressReport."""

    def __init__(
        self,
        report: ProgressReport,
        delay: Callable[[float], None] = time.sleep,
    ) -> None:
        self.report = report
        self._delay = delay

    def do_update(self, package_path: str, install_path: str, parent_pid: int) -> bool:
        """Wait for the application to exit, apply the package and relaunch it."""
        report = self.report
        self.wait_for_main_app_to_close(parent_pid)
        report.set_progress(10)

        report.set_status_text("Applying update...")
        report.add_log_message(f"Update package: {package_path}")
        report.add_log_message(f"Installation path: {install_path}")

        if not self.extract_zip(package_path):
            return False
        report.set_progress(50)

        report.set_progress(80)
        report.add_log_message("Replacing application files...")
        self._delay(2)
        report.add_log_message("File replacement complete.")

        report.set_progress(90)
        report.set_status_text("Update successful!")
        report.add_log_message("Update process finished.")

        report.add_log_message("Restarting application...")
        report.set_progress(100)
        self._delay(1)
        report.on_update_finished(True, "Update completed successfully!")
        self._delay(2)
        self.relaunch_main_app(install_path)
        return True

    def wait_for_main_app_to_close(self, parent_pid: int) -> None:
        """Block until the process with the given id has exited."""
        self.report.set_status_text("Waiting for main application to close...")
        self.report.add_log_message(f"Watching Parent Process ID: {parent_pid}")
        try:
            psutil.Process(parent_pid).wait()
        except (psutil.NoSuchProcess, psutil.AccessDenied, ValueError):
            self.report.add_log_message(
                "Parent process handle could not be opened, assuming it already exited."
            )
        else:
            self.report.add_log_message("Main application has exited. Proceeding with update.")
        self._delay(1.0)

    def extract_zip(self, zip_path: str) -> bool:
        """Check that the package is a readable ZIP archive."""
        self.report.add_log_message("Extracting files...")
        if not str(zip_path).endswith(".zip"):
            self.report.add_log_message(f"Error: The path provided is not a zip file {zip_path}")
            self.report.on_update_finished(False, "Update Failed!")
            return False
        try:
            with zipfile.ZipFile(zip_path) as archive:
                archive.namelist()
        except (OSError, zipfile.BadZipFile):
            self.report.add_log_message(f"Error: Could not open ZIP file {zip_path}")
            return False
        self.report.add_log_message("Extraction complete.")
        return True

    def relaunch_main_app(self, install_path: str) -> bool:
        """Start the application from the install directory; return True on success."""
        app_path = Path(install_path) / "bin" / "ITools.exe"
        self.report.add_log_message(f"Relaunching {app_path}")
        try:
            subprocess.Popen([str(app_path)], cwd=str(install_path))
        except OSError:
            self.report.add_log_message(
                f"Failed to relaunch main application. Error: {app_path} "
            )
            return False
        self.report.add_log_message("Main application relaunched.")
        self.report.on_restart()
        return True


def _log(message: str) -> None:
    db_log("[Updater.exe] " + message)


def _parse_pid(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Command entry point: <packagePath> <installPath> <parentPID>."""
    args = sys.argv if argv is None else [sys.argv[0], *argv]
    if len(args) < 4:
        print("Usage: updater <packagePath> <installPath> <parentPID>", file=sys.stderr)
        return 1
    installer, package_path, install_path = args[0], args[1], args[2]
    parent_pid = _parse_pid(args[3])

    _log("Updater started.")
    _log(f"Installer: {installer}")
    _log(f"Package: {package_path}")
    _log(f"Install Dir: {install_path}")
    _log(f"Parent PID: {parent_pid}")

    report = ProgressReport(stream=sys.stdout)
    UpdateWorker(report).do_update(package_path, install_path, parent_pid)
    return 0


if __name__ == "__main__":
    sys.exit(main())