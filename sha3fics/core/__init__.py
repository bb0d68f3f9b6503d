"""Lowest-level sha3fics pipeline pieces.

Dependency direction rules:
- sha3fics.core must not import sha3fics.cli
"""

from sha3fics.core.classify import Classified, TargetKind, classify_target, is_wildcard_pattern
from sha3fics.core.engine import FileEntry, HashRun, digest_file, hash_many
from sha3fics.core.enumerator import Enumerated, Scope, enumerate_scope, resolve_scope
from sha3fics.core.errors import ErrorKind, Failure, UsageError, exit_code_for
from sha3fics.core.hash import DIGEST_HEX_LEN, WideDigest, is_hex_wide_digest, wide_digest_bytes
from sha3fics.core.manifest import render_manifest_bytes, sort_entries, write_manifest
from sha3fics.core.output_path import output_path_for, safe_wildcard_name
from sha3fics.core.settings import HashSettings

__all__ = [
	"Classified",
	"DIGEST_HEX_LEN",
	"Enumerated",
	"ErrorKind",
	"Failure",
	"FileEntry",
	"HashRun",
	"HashSettings",
	"Scope",
	"TargetKind",
	"UsageError",
	"WideDigest",
	"classify_target",
	"digest_file",
	"enumerate_scope",
	"exit_code_for",
	"hash_many",
	"is_hex_wide_digest",
	"is_wildcard_pattern",
	"output_path_for",
	"render_manifest_bytes",
	"resolve_scope",
	"safe_wildcard_name",
	"sort_entries",
	"wide_digest_bytes",
	"write_manifest",
]
