"""Constants used throughout the cwctl application."""


# Project settings files
SETTINGS_FILE_NAME = ".cw-settings"
LEGACY_SETTINGS_FILE_NAME = ".mc-settings"

# Version endpoints, relative to a connection URL.
# The PFE path is missing its trailing "t" on the server side as well.
PFE_ENVIRONMENT_PATH = "/api/v1/environmen"
GATEKEEPER_ENVIRONMENT_PATH = "/api/v1/gatekeeper/environment"
PERFORMANCE_ENVIRONMENT_PATH = "/performance/api/v1/environment"
IGNORED_PATHS_PATH = "/api/v1/ignoredPaths"

# Markers for project type detection
LIBERTY_SERVER_XML = "src/main/liberty/config/server.xml"
POM_FILE_NAME = "pom.xml"
SPRING_BOOT_GROUP_ID = "<groupId>org.springframework.boot</groupId>"
NODE_MANIFEST = "package.json"
SWIFT_MANIFEST = "Package.swift"

# File patterns for language detection when no build rule matches
LANGUAGE_MARKERS = {
    "java": ["pom.xml", "build.gradle"],
    "go": ["go.mod"],
    "python": ["requirements.txt", "setup.py", "pyproject.toml", "Pipfile"],
}

LANGUAGE_EXTENSIONS = {
    "java": [".java"],
    "javascript": [".js"],
    "swift": [".swift"],
    "python": [".py"],
    "go": [".go"],
}

SKIPPED_SCAN_DIRS = ["node_modules"]

# Template downloads
DEFAULT_TEMPLATE_BRANCH = "master"
DOWNLOAD_CHUNK_SIZE = 8192

# Connections
LOCAL_CONNECTION_ID = "local"
LOCAL_CONNECTION_LABEL = "Codewind local connection"
DEFAULT_LOCAL_URL = "http://localhost:10000"
CONNECTIONS_FILE_NAME = "connections.json"
CONNECTIONS_SCHEMA_VERSION = 1
CONFIG_DIR_ENV = "CWCTL_CONFIG_DIR"
LOCAL_URL_ENV = "CWCTL_LOCAL_URL"
HTTP_TIMEOUT_ENV = "CWCTL_HTTP_TIMEOUT"

# Timeout values
DEFAULT_TIMEOUT = 30  # seconds
DOWNLOAD_TIMEOUT = 120  # 2 minutes
