"""Type hints used in Carca Manager."""

from typing import List, Tuple

# One parsed CSV row
CsvRow = List[str]
# A fixture line together with its 1-based line number in the source
NumberedLine = Tuple[int, str]
# (round index, match index)
CursorPosition = Tuple[int, int]

# Normalised key names delivered by the terminal front end:
# "up", "enter", "c-c"... or the typed character
KeyName = str

# prompt_toolkit formatted text: (style, text) pairs
StyledFragment = Tuple[str, str]
Fragments = List[StyledFragment]

#  LocalWords:  NumberedLine CursorPosition
