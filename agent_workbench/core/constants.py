"""Constants used throughout the Agent Workbench application."""


# Workbench data directory
DATA_DIR_NAME = ".agent-workbench"
CONFIG_FILE_NAME = "workbench_config.json"
BOOT_DELAY_ENVVAR = "AGENT_WORKBENCH_BOOT_DELAY"

# Container defaults
DEFAULT_BOOT_DELAY = 2.0  # seconds
DEFAULT_OS_LABEL = "Ubuntu 22.04 LTS"
DEFAULT_RESOURCES = {
    "cpu": "2 cores",
    "memory": "4GB",
    "storage": "20GB",
}

# Terminal
PROMPT_ID_LENGTH = 8
PROMPT_TEMPLATE = "root@{host}:~# "
TIMESTAMP_FORMAT = "%H:%M:%S"
WORKDIR = "/workspace"
DIRECTORY_LISTING = "app.py  requirements.txt  src/  tests/  README.md"

# Boot trace
BOOT_STARTED = "Container {name} started"
BOOT_OS_INITIALIZED = "{os_label} initialized"
BOOT_AGENT_LOADED = "{agent} AI Agent loaded"
BOOT_NO_AGENT = "No AI Agent loaded"
BOOT_MCP_ENABLED = "MCP Protocol enabled"
STOPPED_LINE = "Container stopped"

# Interpreter
CLEAR_COMMAND = "clear"
AI_HELP_TOKEN = "ai help"
AI_GENERATE_TOKEN = "ai generate"
AI_GENERATE_PREFIX = "ai generate "
LS_TOKEN = "ls"
PWD_TOKEN = "pwd"
CLAUDE_HELP_TEXT = (
    'Claude AI: I can help you with code generation, debugging, and analysis. '
    'Try "ai generate <description>" or "ai debug <code>"'
)
GEMINI_HELP_TEXT = (
    'Gemini AI: Ready to assist with coding tasks, explanations, and problem-solving. '
    'Use "ai code <task>" or "ai explain <concept>"'
)
GENERATE_RESPONSE = "AI: Generating code for: {request}"
GENERATE_CONTEXT = "Sharing code generation context: {request}"
COMMAND_NOT_FOUND = "bash: {command}: command not found"

# Message bus
MESSAGE_ID_TEMPLATE = "msg-{sequence:06d}"

# Quick start walkthrough run by `agent-workbench demo`
DEMO_COMMANDS = [
    "ai help",
    "ai generate a Python function",
    "ls",
]
