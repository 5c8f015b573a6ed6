"""javaenv settings: names and defaults used when resolving a Java environment."""

# Per-project configuration file discovered by walking up from a source file.
CONFIG_FILE_NAME = "javaconfig.json"

# Environment variables searched (in this order) for executables.
JAVA_HOME_VAR = "JAVA_HOME"
PATH_VAR = "PATH"

# Suffix appended to binary names on Windows.
WINDOWS_EXECUTABLE_SUFFIX = ".exe"

# Used when no javaconfig.json governs a file.
DEFAULT_SOURCE_PATH = ("src",)
DEFAULT_OUTPUT_DIRECTORY = "target"

# Class path files and compiler options always use a colon, whatever the OS.
CLASS_PATH_SEPARATOR = ":"
