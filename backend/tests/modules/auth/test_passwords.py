from modules.auth.passwords import PasswordHasher


class TestPasswordHasher:
    def test_hash_is_not_plaintext(self, hasher):
        """The digest never equals the plaintext."""
        digest = hasher.hash("Abcd1234!")
        assert digest != "Abcd1234!"
        assert digest.startswith("$2")

    def test_verify_matching_password(self, hasher):
        """verify should accept the original password."""
        digest = hasher.hash("Abcd1234!")
        assert hasher.verify("Abcd1234!", digest) is True

    def test_verify_wrong_password(self, hasher):
        """verify should reject a different password."""
        digest = hasher.hash("Abcd1234!")
        assert hasher.verify("Abcd1234?", digest) is False

    def test_hashes_are_salted(self, hasher):
        """Two digests of the same password differ."""
        assert hasher.hash("Abcd1234!") != hasher.hash("Abcd1234!")

    def test_verify_empty_inputs(self, hasher):
        """Empty password or digest never verifies."""
        digest = hasher.hash("Abcd1234!")
        assert hasher.verify("", digest) is False
        assert hasher.verify("Abcd1234!", "") is False

    def test_verify_malformed_digest(self, hasher):
        """A stored value that is not a bcrypt digest never verifies."""
        assert hasher.verify("Abcd1234!", "plaintext-in-db") is False

    def test_rounds_are_used(self):
        """The configured cost appears in the digest."""
        digest = PasswordHasher(rounds=5).hash("Abcd1234!")
        assert digest.split("$")[2] == "05"

    def test_long_passwords_truncate_consistently(self, hasher):
        """Passwords beyond 72 bytes hash and verify without error."""
        long_password = "Aa1!" * 30
        digest = hasher.hash(long_password)
        assert hasher.verify(long_password, digest) is True
