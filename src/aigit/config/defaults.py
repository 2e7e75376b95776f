"""Default configuration values for AI-Git."""

DEFAULT_SYSTEM_PROMPT = (
	"You are an expert developer. Generate a raw git commit message. Output ONLY the message. "
	"Structure: a short title, then a blank line, then a description. "
	"No conversational filler, no quotes, no backticks."
)

DEFAULT_COMMIT_PROMPT_TEMPLATE = (
	"Generate a raw git commit message for the changes below. Output ONLY the message. "
	"Structure: a short title, then a blank line, then a description. "
	"No conversational filler, no quotes, no backticks.\n\n"
	"Changes:\n{diff}\n\n{context}"
)

# Global config lives under $XDG_CONFIG_HOME/<CONFIG_DIR_NAME>/<CONFIG_FILE_NAME>
CONFIG_DIR_NAME = "ai-git"
CONFIG_FILE_NAME = "config.yaml"
CONFIG_ENV_VAR = "AI_GIT_CONFIG"

REPO_CONFIG_FILE_NAME = ".ai-git.yaml"

# Values written by `ai-git init`
FALLBACK_PROVIDER = "openai"
DEFAULT_COMMIT_STYLE = "conventional"
DEFAULT_LANGUAGE = "english"

# Commit prompt placeholders. Templates either name them or use two positional
# "%s" markers, filled with the diff and then the context.
DIFF_PLACEHOLDER = "{diff}"
CONTEXT_PLACEHOLDER = "{context}"
POSITIONAL_PLACEHOLDER = "%s"
