"""Tests for the root digest protocol and the sha256:<hex> digest format."""

import re

import pytest

from modeldigest.core.config.serialization_config import SerializationConfig
from modeldigest.core.exceptions import DigestError, ModelPathError
from modeldigest.core.models import FileEntry, Manifest
from modeldigest.services.manifest_builder import serialize
from modeldigest.services.root_digest import (
    compute_digest,
    compute_root_digest,
    format_digest,
    parse_digest,
)

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

SCENARIO_TREE = {
    "file1.txt": "test content 1\n",
    "file2.txt": "test content 2\n",
    "config.json": "config data\n",
}
SCENARIO_HASHES = {
    "config.json": "8cd77452b81db0c12f544fa584ab6e266a83140262d87aefc1ffbeb028757936",
    "file1.txt": "43fde91f6342fe775631f15bbabd0a9be032a494df6603a9578f72ec8ade2ec9",
    "file2.txt": "cdab825abbd288de3108c818029fd5ae8759e74d363547f63ef2c6f0ab9c05c4",
}
# sha256(raw(config.json) || raw(file1.txt) || raw(file2.txt))
SCENARIO_ROOT = "f6d1e3f8bc318fb335b1f59d16426a3044ccd9d2a941ac90ec4ac4e6af49364c"

DIGEST_RE = re.compile(r"^sha256:[0-9a-f]{64}$")


def _manifest(entries: dict[str, dict[str, str]]) -> Manifest:
    return Manifest.from_entries(
        "model", [FileEntry(name, digest) for name, digest in entries.items()]
    )


class TestComputeRootDigest:
    def test_empty_manifest(self):
        assert compute_root_digest(Manifest(model_name="empty")) == EMPTY_SHA256

    def test_known_vector(self):
        manifest = _manifest({name: {"sha256": h} for name, h in SCENARIO_HASHES.items()})
        assert compute_root_digest(manifest) == SCENARIO_ROOT

    def test_single_file_is_hash_of_raw_hash(self):
        # sha256("test") and sha256 of its 32 raw bytes
        file_hash = "9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08"
        manifest = _manifest({"test.txt": {"sha256": file_hash}})
        assert (
            compute_root_digest(manifest)
            == "954d5a49fd70d9b8bcdb35d252267829957f7ef7fa6c74f88419bdc5e82209f4"
        )

    def test_order_matters(self):
        a = FileEntry("a", {"sha256": "00" * 32})
        b = FileEntry("b", {"sha256": "11" * 32})
        forward = Manifest(model_name="m", files=(a, b))
        backward = Manifest(model_name="m", files=(b, a))
        assert compute_root_digest(forward) != compute_root_digest(backward)

    def test_names_do_not_enter_hash(self):
        """Only order and raw hash bytes contribute."""
        one = _manifest({"a": {"sha256": "00" * 32}})
        two = _manifest({"renamed": {"sha256": "00" * 32}})
        assert compute_root_digest(one) == compute_root_digest(two)

    def test_uppercase_hex_decodes_to_same_bytes(self):
        lower = _manifest({"a": {"sha256": "ab" * 32}})
        upper = _manifest({"a": {"sha256": "AB" * 32}})
        assert compute_root_digest(lower) == compute_root_digest(upper)

    def test_missing_sha256(self):
        manifest = _manifest({"a.bin": {"sha256": "00" * 32}, "b.bin": {"sha512": "00"}})
        with pytest.raises(DigestError) as exc_info:
            compute_root_digest(manifest)
        assert exc_info.value.path == "b.bin"
        assert "b.bin" in str(exc_info.value)

    @pytest.mark.parametrize("bad", ["zz" * 32, "abc", "ab cd", "é" * 4])
    def test_malformed_hex(self, bad):
        manifest = _manifest({"weights/bad.bin": {"sha256": bad}})
        with pytest.raises(DigestError) as exc_info:
            compute_root_digest(manifest)
        assert exc_info.value.path == "weights/bad.bin"


class TestDigestFormat:
    def test_format(self):
        assert format_digest(EMPTY_SHA256) == f"sha256:{EMPTY_SHA256}"

    def test_parse(self):
        assert parse_digest(f"sha256:{SCENARIO_ROOT}") == ("sha256", SCENARIO_ROOT)

    @pytest.mark.parametrize(
        "text",
        [
            SCENARIO_ROOT,
            f"SHA256:{SCENARIO_ROOT}",
            f"sha256:{SCENARIO_ROOT.upper()}",
            f"sha256:{SCENARIO_ROOT[:-1]}",
            f"sha512:{SCENARIO_ROOT}",
            f"sha256: {SCENARIO_ROOT}",
        ],
    )
    def test_parse_rejects(self, text):
        with pytest.raises(DigestError):
            parse_digest(text)


class TestComputeDigest:
    def test_scenario_tree(self, make_tree):
        root = make_tree(SCENARIO_TREE)
        manifest = serialize(root)
        assert manifest.names() == ["config.json", "file1.txt", "file2.txt"]
        assert compute_digest(root) == f"sha256:{SCENARIO_ROOT}"

    def test_matches_independent_root_digest(self, make_tree):
        root = make_tree({"model.bin": "model data", "config.json": '{"version": "1.0"}'})
        digest = compute_digest(root)
        assert DIGEST_RE.match(digest)
        assert len(digest) == 71
        assert digest.removeprefix("sha256:") == compute_root_digest(serialize(root))

    def test_empty_tree(self, make_tree):
        assert compute_digest(make_tree({})) == f"sha256:{EMPTY_SHA256}"

    def test_git_only_tree_is_empty_by_default(self, make_tree):
        root = make_tree({".git/HEAD": "ref", ".gitattributes": "* binary"})
        assert compute_digest(root) == f"sha256:{EMPTY_SHA256}"
        assert compute_digest(root, SerializationConfig(ignore_git_paths=False)) != (
            f"sha256:{EMPTY_SHA256}"
        )

    def test_stable_across_runs(self, make_tree):
        root = make_tree({f"shard-{i:03d}.bin": f"data {i}" for i in range(30)})
        assert compute_digest(root) == compute_digest(root)

    def test_content_change_changes_digest(self, make_tree):
        root = make_tree(SCENARIO_TREE)
        before = compute_digest(root)
        (root / "file1.txt").write_text("test content 1 changed\n")
        assert compute_digest(root) != before

    def test_ignored_file_change_keeps_digest(self, make_tree):
        root = make_tree({**SCENARIO_TREE, "cache/tmp.bin": "x"})
        config = SerializationConfig(ignore_paths=["cache"])
        before = compute_digest(root, config)
        (root / "cache" / "tmp.bin").write_text("y")
        assert compute_digest(root, config) == before
        assert before == f"sha256:{SCENARIO_ROOT}"

    def test_custom_hasher(self, make_tree, fake_hasher):
        root = make_tree(SCENARIO_TREE)
        assert compute_digest(root, hasher=fake_hasher) == f"sha256:{SCENARIO_ROOT}"
        assert len(fake_hasher.calls) == 1

    def test_non_directory_input_is_rejected(self, make_tree):
        root = make_tree({"model.bin": "m"})
        with pytest.raises(ModelPathError):
            compute_digest(root / "model.bin")
