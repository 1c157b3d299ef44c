"""Shared helpers for prompt tests."""

import io
import os
import sys

sys.path.insert(0, os.path.dirname(__file__))

from lineprompt.options import DEFAULT_POLICY
from lineprompt.prompt import Prompt


def make_prompt(answer_text, policy=DEFAULT_POLICY, output=None):
    """Create a Prompt reading answer_text and writing to output (a StringIO by default)."""
    if output is None:
        output = io.StringIO()
    return Prompt(reader=io.StringIO(answer_text), writer=output, policy=policy)


class RecordingStreams:
    """Reader/writer pair that logs write, flush and readline calls in order."""

    def __init__(self, answer_text):
        self.events = []
        self._reader = io.StringIO(answer_text)

    def write(self, text):
        self.events.append(("write", text))
        return len(text)

    def flush(self):
        self.events.append(("flush", None))

    def readline(self):
        self.events.append(("readline", None))
        return self._reader.readline()

    def event_names(self):
        return [name for name, _ in self.events]
