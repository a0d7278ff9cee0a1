"""
Password policy, hashing and generation tests.
"""
import string

import pytest
from hypothesis import given, settings, strategies as st

from apps.users.domain.services import SPECIAL_CHARACTERS
from apps.users.infrastructure.services import BCRYPT_ROUNDS, BcryptPasswordService
from tests.fakes import FastPasswordHasher

service = BcryptPasswordService()

ALPHABET = string.ascii_letters + string.digits + SPECIAL_CHARACTERS + ' ~`"\'/\\éß'


def expected_strength(password: str) -> bool:
    return (
        len(password) >= 8
        and any(c in string.ascii_lowercase for c in password)
        and any(c in string.ascii_uppercase for c in password)
        and any(c in string.digits for c in password)
        and any(c in SPECIAL_CHARACTERS for c in password)
    )


class TestValidateStrength:

    def test_strong_password(self):
        assert service.validate_strength('TestPassword123!')

    @pytest.mark.parametrize('password', [
        'testpassword123!',  # no uppercase
        'TESTPASSWORD123!',  # no lowercase
        'TestPassword!',     # no digit
        'TestPassword123',   # no special character
        'Test1!',            # too short
        '',
    ])
    def test_weak_passwords(self, password):
        assert not service.validate_strength(password)

    def test_exactly_minimum_length(self):
        assert service.validate_strength('Abcde1!x')
        assert not service.validate_strength('Abcd1!x')

    @pytest.mark.parametrize('special', list(SPECIAL_CHARACTERS))
    def test_every_special_character_counts(self, special):
        assert service.validate_strength(f'Abcdef1{special}')

    def test_characters_outside_the_special_set_do_not_count(self):
        assert not service.validate_strength('Abcdef1~')
        assert not service.validate_strength('Abcdef1 ')

    @given(st.text(alphabet=ALPHABET, max_size=24))
    @settings(max_examples=500)
    def test_matches_policy_for_random_strings(self, password):
        assert service.validate_strength(password) == expected_strength(password)

    @given(
        st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=4),
        st.text(alphabet=string.ascii_uppercase, min_size=1, max_size=4),
        st.text(alphabet=string.digits, min_size=1, max_size=4),
        st.text(alphabet=SPECIAL_CHARACTERS, min_size=1, max_size=4),
        st.sampled_from(['lower', 'upper', 'digit', 'special', None]),
    )
    @settings(max_examples=300)
    def test_dropping_any_class_fails(self, lower, upper, digit, special, dropped):
        parts = {'lower': lower, 'upper': upper, 'digit': digit, 'special': special}
        if dropped:
            parts[dropped] = ''
        password = ''.join(parts.values())

        assert service.validate_strength(password) == (dropped is None and len(password) >= 8)


class TestHashing:

    def test_hash_differs_from_plaintext(self, password_service):
        hashed = password_service.hash_password('TestPassword123!')

        assert hashed != 'TestPassword123!'
        assert 'TestPassword123!' not in hashed

    def test_uses_bcrypt_with_fixed_cost(self, password_service):
        hashed = password_service.hash_password('TestPassword123!')

        assert hashed.startswith('bcrypt_sha256$')
        assert f'$2b${BCRYPT_ROUNDS}$' in hashed

    def test_same_password_hashes_differently(self, fast_password_service):
        first = fast_password_service.hash_password('TestPassword123!')
        second = fast_password_service.hash_password('TestPassword123!')

        assert first != second

    def test_compare_accepts_correct_password(self, password_service):
        hashed = password_service.hash_password('TestPassword123!')

        assert password_service.compare_password('TestPassword123!', hashed)

    def test_compare_rejects_wrong_password(self, fast_password_service):
        hashed = fast_password_service.hash_password('TestPassword123!')

        assert not fast_password_service.compare_password('WrongPassword123!', hashed)
        assert not fast_password_service.compare_password('TestPassword123', hashed)

    @pytest.mark.parametrize('hashed', ['', None])
    def test_compare_without_hash_is_false(self, fast_password_service, hashed):
        assert not fast_password_service.compare_password('TestPassword123!', hashed)

    @given(st.text(min_size=1, max_size=40), st.text(min_size=1, max_size=40))
    @settings(max_examples=10, deadline=None)
    def test_compare_round_trip(self, password, other):
        fast = BcryptPasswordService(hasher=FastPasswordHasher())
        hashed = fast.hash_password(password)

        assert fast.compare_password(password, hashed)
        if other != password:
            assert not fast.compare_password(other, hashed)


class TestGenerateSecurePassword:

    def test_default_length(self):
        assert len(service.generate_secure_password()) == 12

    def test_custom_length(self):
        assert len(service.generate_secure_password(16)) == 16

    def test_passwords_differ(self):
        generated = {service.generate_secure_password() for _ in range(50)}

        assert len(generated) == 50

    def test_uses_only_known_characters(self):
        allowed = set(string.ascii_letters + string.digits + SPECIAL_CHARACTERS)

        assert set(service.generate_secure_password(64)) <= allowed

    @given(st.integers(min_value=8, max_value=128))
    @settings(max_examples=200)
    def test_always_satisfies_policy(self, length):
        password = service.generate_secure_password(length)

        assert len(password) == length
        assert service.validate_strength(password)

    @given(st.integers(max_value=7))
    def test_rejects_short_lengths(self, length):
        with pytest.raises(ValueError):
            service.generate_secure_password(length)

    def test_required_classes_are_not_in_fixed_positions(self):
        first_chars = {service.generate_secure_password()[0] for _ in range(200)}

        # An unshuffled password would always start with an uppercase letter
        assert any(not c.isupper() for c in first_chars)
