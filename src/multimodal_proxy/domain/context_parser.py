"""Rebuilds file context from prompts composed by the front-end."""

from .models import FileCategory, ParsedPrompt, ParseStatus, PromptContext

CONTEXT_MARKER = "Context from uploaded files:\n"
QUERY_MARKER = "\n\nUser Query: "
FILE_MARKER = "File: "
CATEGORY_OPEN = " ("
CATEGORY_CLOSE = ")"
CONTENT_MARKER = "Content:"
TRUNCATION_MARKER = "..."

PLACEHOLDERS = {
    FileCategory.image: "Image file uploaded (visual content available)",
    FileCategory.audio: "Audio file uploaded (auditory content available)",
    FileCategory.video: "Video file uploaded (visual and auditory content available)",
}


class ContextParser:
    """
    Splits a prompt of the form::

        Context from uploaded files:
        File: <name> (<category>)
        Content: <text>...

        User Query: <query>

    into a PromptContext and the user query. Parsing is marker based and never
    raises; any prompt it cannot read is returned whole as the query.
    """

    def parse(self, prompt: str) -> ParsedPrompt:
        sections = self._split_sections(prompt)
        if sections is None:
            return ParsedPrompt(
                context=None, query=prompt, status=ParseStatus.no_context
            )

        file_block, query = sections
        file_line = self._read_file_line(file_block)
        if file_line is None:
            return ParsedPrompt(
                context=None, query=prompt, status=ParseStatus.malformed_block
            )

        file_name, raw_category = file_line
        category = self._to_category(raw_category)
        context = PromptContext(
            file_name=file_name,
            category=category,
            content=self._extract_content(file_block, category, raw_category),
        )
        return ParsedPrompt(context=context, query=query, status=ParseStatus.parsed)

    def _split_sections(self, prompt: str) -> tuple[str, str] | None:
        """Returns (file_block, query), or None when either part is missing."""
        start = prompt.find(CONTEXT_MARKER)
        if start == -1:
            return None
        block_start = start + len(CONTEXT_MARKER)

        query_marker = prompt.find(QUERY_MARKER, block_start)
        if query_marker == -1:
            return None

        file_block = prompt[block_start:query_marker]
        query = prompt[query_marker + len(QUERY_MARKER) :]
        if not file_block or not query:
            return None
        return file_block, query

    def _read_file_line(self, file_block: str) -> tuple[str, str] | None:
        """Reads '<name> (<category>)' following the first 'File: ' marker."""
        start = file_block.find(FILE_MARKER)
        if start == -1:
            return None
        line = file_block[start + len(FILE_MARKER) :].split("\n", 1)[0]

        open_at = line.find(CATEGORY_OPEN)
        if open_at == -1:
            return None
        close_at = line.find(CATEGORY_CLOSE, open_at + len(CATEGORY_OPEN))
        if close_at == -1:
            return None

        return line[:open_at], line[open_at + len(CATEGORY_OPEN) : close_at]

    def _to_category(self, raw_category: str) -> FileCategory:
        try:
            return FileCategory(raw_category)
        except ValueError:
            return FileCategory.other

    def _extract_content(
        self, file_block: str, category: FileCategory, raw_category: str
    ) -> str:
        if category is FileCategory.text:
            return self._inline_text(file_block)
        if category in PLACEHOLDERS:
            return PLACEHOLDERS[category]
        return f"{raw_category} file uploaded"

    def _inline_text(self, file_block: str) -> str:
        """Text between 'Content:' and the first following '...', trimmed."""
        marker = file_block.find(CONTENT_MARKER)
        if marker == -1:
            return ""
        start = marker + len(CONTENT_MARKER)
        end = file_block.find(TRUNCATION_MARKER, start)
        if end == -1:
            end = len(file_block)
        return file_block[start:end].strip()
