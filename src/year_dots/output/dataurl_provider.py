"""PNG data URL output provider."""

import base64

from ..layout import RenderModel
from .png_provider import PngOutputProvider


# Marker to search for in files for injection mode
_MARKER = "<!-- year-dots -->"


class PngDataUrlOutputProvider(PngOutputProvider):
    """Output provider that generates PNG as a data URL and writes an HTML img tag to a file."""

    def encode(self, model: RenderModel) -> bytes:
        """
        Encode the model as a PNG data URL.

        Returns:
            The data URL string as bytes (for consistency with other providers)
        """
        png_bytes = super().encode(model)
        base64_data = base64.b64encode(png_bytes).decode("ascii")
        return f"data:image/png;base64,{base64_data}".encode("utf-8")

    def write(self, data: bytes) -> None:
        """
        Write data URL to file as an HTML img tag with injection or append mode.

        Args:
            data: Data URL as bytes (will be decoded as UTF-8 text)
        """
        if not self.path:
            raise ValueError("Output path not set")
        img_tag = f'<img src="{data.decode("utf-8")}" />'

        # Try to create new file exclusively (avoids TOCTOU race condition)
        try:
            with open(self.path, "x") as f:
                f.write(img_tag + "\n")
            return
        except FileExistsError:
            with open(self.path, "r") as f:
                content = f.read()

        if _MARKER in content:
            # Injection mode: replace the line containing the marker
            lines = content.splitlines(keepends=True)
            for i, line in enumerate(lines):
                if _MARKER in line:
                    lines[i] = img_tag + "\n"
                    break
            content = "".join(lines)
        else:
            # Append mode: add to end
            if content and not content.endswith("\n"):
                content += "\n"
            content += img_tag + "\n"

        with open(self.path, "w") as f:
            f.write(content)
