"""Core constants for modeldigest."""

# Algorithm used for per-file hashes and the root digest
DEFAULT_ALGORITHM = "sha256"

# Prefix of the textual root digest ("sha256:<hex>")
DIGEST_PREFIX = f"{DEFAULT_ALGORITHM}:"

# Length of a hex-encoded SHA-256 digest
SHA256_HEX_LENGTH = 64

# Version-control artifacts ignored when ignore_git_paths is set
GIT_PATHS: tuple[str, ...] = (".git", ".gitignore", ".gitattributes", ".github")

# Read size used when streaming file contents into a hash
HASH_CHUNK_SIZE = 1024 * 1024
