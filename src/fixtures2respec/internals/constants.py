"""Application-wide constants and configuration values."""

from pathlib import Path

# Packaged resources copied into the user folder by the scaffold.
RESOURCES_DIR = Path(__file__).parent.parent / "resources"

# Suffix added to the ReSpec file's stem when writing the spliced copy.
OUTPUT_HTML_SUFFIX = "_updated"

# Figure markup spliced after each matched section. Indentation matches the
# respec source so the diff stays readable.
FIGURE_TEMPLATE = """<figure class="example">
            <figcaption> - {caption} - JSON-LD</figcaption>
            <pre><code data-include="{include_path}"></code></pre>
        </figure>"""
FIGURE_SEPARATOR = "\n        "

# Fragment folders that decide whether a section documents an Entity or an Event.
ENTITY_FRAGMENT_DIR = "fragments/entities/"
EVENT_FRAGMENT_DIR = "fragments/events/"

# Filenames for the optional record dumps.
SECTIONS_DUMP_FILENAME = "sections.json"
FIXTURES_DUMP_FILENAME = "fixtures.json"

# Env var names
DEBUG_ENV_VAR = "FIXTURES2RESPEC_DEBUG"
HOME_ENV_VAR = "FIXTURES2RESPEC_HOME"
SESSION_ENV_VAR = "FIXTURES2RESPEC_SESSION_ID"

# Fallback for get_debug_mode() in utils
DEBUG_MODE_DEFAULT = False  # Hard-coded default
