"""
When a match fails, it is polite to show where.

Matching works on plain string offsets into the (trimmed) input, and most inputs are a single
line. For those, a position reads best as a count: "after 7 characters". Should the input span
several lines, the offset is turned into a line and column instead.

Either way, the complaint ends with a picture of the offending line and a row of carets under
the spot. Unix (\\n), old Mac (\\r) and DOS (\\r\\n) line breaks are recognized by default;
pick another convention by key from LINEBREAK_MODE.
"""

import bisect, re, sys

LINEBREAK_MODE = {
	'normal': re.compile(r'\r\n?|\n'),
	'unix': re.compile(r'\n'),
	'apple': re.compile(r'\r'),
	'dos': re.compile(r'\r\n'),
}

def caret_picture(line:str, start:int, width:int=1, *, margin=' >>> ', caption="near here") -> str:
	""" The line (less its line break) and, under it, carets marking `width` characters from `start`. """
	line = line.rstrip('\r\n')
	indent = ''.join(c if c == '\t' else ' ' for c in margin + line[:start])
	carets = '^' * max(1, min(width, len(line) - start))
	return "%s%s\n%s%s %s"%(margin, line, indent, carets, caption)

def plural(count:int, noun:str) -> str:
	return "%d %s%s"%(count, noun, "" if count == 1 else "s")

class SourceText:
	""" The input to a match, able to say in words and pictures where some offset falls. """
	def __init__(self, content:str, line_breaks='normal'):
		self.content = content
		self.line_breaks = line_breaks
		self.__bounds = None
	
	def __make_bounds(self):
		""" Lazily only find line breaks if it turns out to be necessary for a particular text. """
		if self.__bounds is None:
			inside = [m.end() for m in LINEBREAK_MODE[self.line_breaks].finditer(self.content)]
			self.__bounds = [0] + inside + [len(self.content)]
	
	def is_single_line(self) -> bool:
		self.__make_bounds()
		return len(self.__bounds) == 2

	def find_row_col(self, index:int):
		""" One-based row, zero-based column. """
		self.__make_bounds()
		row = bisect.bisect_right(self.__bounds, index, hi=len(self.__bounds) - 1) - 1
		return row+1, index - self.__bounds[row]
	
	def line_of_text(self, row:int) -> str:
		self.__make_bounds()
		r = max(0, row - 1)
		return self.content[self.__bounds[r]:self.__bounds[r + 1]]
	
	def where(self, index:int) -> str:
		if self.is_single_line(): return "after " + plural(index, "character")
		row, col = self.find_row_col(index)
		return "at line %d, column %d"%(row, col+1)
	
	def complaint(self, a_slice:slice, message:str, caption="near here") -> str:
		left, right = a_slice.start, a_slice.stop
		row, col = self.find_row_col(left)
		where = self.where(left)
		picture = caret_picture(self.line_of_text(row), col, right - left, caption=caption)
		return "%s%s: %s\n%s"%(where[0].upper(), where[1:], message, picture)

	def complain(self, a_slice:slice, message:str, caption="near here"):
		print(self.complaint(a_slice, message, caption), file=sys.stderr)
