import json
import os
from datetime import datetime, timezone

class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="tape_machine_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry, default=str) + "\n")

    @staticmethod
    def _timestamp():
        return datetime.now(timezone.utc).isoformat()

    def log(self, entry: dict):
        """Log a single entry to the main run log."""
        self.log_batch([entry])

    def log_batch(self, entries: list):
        """Log a batch of entries to the main run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry, default=str) + "\n")

    def rotate(self):
        """Start a new main log file if the UTC day has changed."""
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def log_run(self, program_name, result, tape):
        """Log the outcome of a finished run; halting runs also go to the halting log."""
        self.rotate()
        entry = {
            "timestamp": self._timestamp(),
            "program": program_name,
            "halted": result.halted,
            "steps": result.steps,
            "state": None if result.halted else result.machine.state,
            "head": result.cursor.position,
            "cells_materialized": len(tape),
            # JSON object keys must be strings
            "tape": {str(position): symbol for position, symbol in tape.contents().items()},
        }
        self.log(entry)
        if result.halted:
            self._log_to_file(f"halting_{self.today}.jsonl", [entry])
        return entry

    def log_fault(self, program_name, error, steps):
        """Log a run that stopped on a machine fault."""
        self.rotate()
        entry = {
            "timestamp": self._timestamp(),
            "program": program_name,
            "error": type(error).__name__,
            "message": str(error),
            "steps": steps,
        }
        observed = getattr(error, "observed", None)
        if observed is not None:
            entry["symbol"] = observed.symbol
            entry["state"] = observed.state
        self._log_to_file(f"faults_{self.today}.jsonl", [entry])
        return entry
