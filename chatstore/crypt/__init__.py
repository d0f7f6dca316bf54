"""
The `crypt` package provides the password hashing collaborator used by the
user store.

It centralizes password hashing and verification so every stored password
goes through the same salted, adaptive hash.

Contents
--------
- encrypt_decrypt
    Utility module exposing the `EncryptionDec` class:
        * `hash_password` - hashes plaintext passwords using bcrypt with a fresh salt
        * `check_passwords` - verifies a plaintext password against a stored hash

Any object offering the same two methods can be passed to the user store in
its place (e.g. a cheaper hasher in tests).
"""
