"""Tests for URL scheme and private-address validation."""

from __future__ import annotations

import socket
from unittest.mock import patch

import pytest

from hiresight.errors import FetchError, UnsafeURLError
from hiresight.utils.url_validator import check_scheme, validate_url


class TestCheckScheme:
    def test_strips_whitespace(self):
        assert check_scheme("  https://jobs.example.com/1  ") == "https://jobs.example.com/1"

    def test_rejects_ftp_scheme(self):
        with pytest.raises(UnsafeURLError, match="Unsupported URL scheme"):
            check_scheme("ftp://example.com/file")

    def test_rejects_bare_text(self):
        with pytest.raises(UnsafeURLError):
            check_scheme("not a url")

    def test_unsafe_url_is_a_fetch_error(self):
        with pytest.raises(FetchError):
            check_scheme("file:///etc/passwd")


class TestValidateUrl:
    """Direct fetch targets must not point at internal addresses."""

    def test_blocks_localhost(self):
        with pytest.raises(UnsafeURLError, match="Blocked internal hostname"):
            validate_url("http://localhost/admin")

    def test_blocks_127_0_0_1(self):
        with pytest.raises(UnsafeURLError):
            validate_url("http://127.0.0.1/admin")

    def test_blocks_ipv6_loopback(self):
        with pytest.raises(UnsafeURLError):
            validate_url("http://[::1]/admin")

    def test_blocks_10_network(self):
        with pytest.raises(UnsafeURLError):
            validate_url("http://10.0.0.1/internal")

    def test_blocks_192_168_network(self):
        with pytest.raises(UnsafeURLError):
            validate_url("http://192.168.1.1/internal")

    def test_blocks_metadata_address(self):
        with pytest.raises(UnsafeURLError):
            validate_url("http://169.254.169.254/latest/meta-data")

    def test_blocks_hostname_resolving_to_private_ip(self):
        fake_result = [(2, 1, 6, "", ("10.0.0.5", 0))]
        with patch("socket.getaddrinfo", return_value=fake_result):
            with pytest.raises(UnsafeURLError, match="resolves to blocked address"):
                validate_url("http://evil.example.com/steal")

    def test_allows_external_url(self):
        fake_result = [(2, 1, 6, "", ("142.250.80.46", 0))]
        with patch("socket.getaddrinfo", return_value=fake_result):
            assert validate_url("https://careers.example.com/job/1") == "https://careers.example.com/job/1"

    def test_allows_public_ip_literal(self):
        assert validate_url("http://8.8.8.8/") == "http://8.8.8.8/"

    def test_rejects_file_scheme(self):
        with pytest.raises(UnsafeURLError, match="Unsupported URL scheme"):
            validate_url("file:///etc/passwd")

    def test_rejects_empty_hostname(self):
        with pytest.raises(UnsafeURLError, match="No hostname"):
            validate_url("http:///path")

    def test_rejects_unresolvable_hostname(self):
        with patch("socket.getaddrinfo", side_effect=socket.gaierror("Name resolution failed")):
            with pytest.raises(UnsafeURLError, match="Cannot resolve hostname"):
                validate_url("http://this-domain-does-not-exist-xyz123.com/path")
