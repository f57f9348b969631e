"""Tests for the configuration loader."""

import tempfile
from pathlib import Path

import pytest
from aws_cdk import RemovalPolicy

from infrastructure.config import Config, CounterConfig, SiteConfig


def load(yaml_content: str) -> Config:
  """Write YAML to a temporary file and load it."""
  with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
    f.write(yaml_content)
    f.flush()

    return Config.from_yaml(Path(f.name))


class TestSiteConfig:
  """Test SiteConfig dataclass."""

  def test_default_values(self) -> None:
    """Verify default values are set correctly."""
    config = SiteConfig(
      domain="example.com",
      owner="Test Owner",
      email="test@example.com",
    )

    assert config.domain == "example.com"
    assert config.include_www is True
    assert config.deploy_initial_content is True
    assert config.removal_policy == RemovalPolicy.RETAIN
    assert config.hosted_zone_id is None
    assert config.region == "us-east-1"
    assert config.counter == CounterConfig()


class TestCounterConfig:
  """Test CounterConfig dataclass."""

  def test_default_values(self) -> None:
    """Verify counter defaults."""
    counter = CounterConfig()

    assert counter.table_name is None
    assert counter.counter_key == "visits"
    assert counter.timeout_seconds == 3

  def test_rejects_non_positive_timeout(self) -> None:
    """Verify the store timeout must be positive."""
    with pytest.raises(ValueError, match="timeout_seconds"):
      CounterConfig(timeout_seconds=0)


class TestConfigFromYaml:
  """Test Config.from_yaml loading."""

  def test_load_simple_config(self) -> None:
    """Test loading a simple configuration."""
    config = load(
      """
sites:
  - domain: example.com
    owner: Test Owner
    email: test@example.com
"""
    )

    assert len(config.sites) == 1
    assert config.sites[0].domain == "example.com"
    assert config.sites[0].owner == "Test Owner"
    assert config.sites[0].email == "test@example.com"
    assert config.sites[0].counter == CounterConfig()

  def test_load_with_defaults(self) -> None:
    """Test loading configuration with defaults."""
    config = load(
      """
defaults:
  region: us-west-2
  include_www: false
  counter:
    timeout_seconds: 5

sites:
  - domain: example.com
    owner: Test Owner
    email: test@example.com
"""
    )

    assert config.sites[0].region == "us-west-2"
    assert config.sites[0].include_www is False
    assert config.sites[0].counter is not None
    assert config.sites[0].counter.timeout_seconds == 5

  def test_site_overrides_defaults(self) -> None:
    """Test that site-specific config overrides defaults."""
    config = load(
      """
defaults:
  include_www: false
  counter:
    counter_key: visits
    timeout_seconds: 5

sites:
  - domain: example.com
    owner: Test Owner
    email: test@example.com
    include_www: true
    counter:
      counter_key: home
"""
    )

    site = config.sites[0]
    assert site.include_www is True
    assert site.counter is not None
    assert site.counter.counter_key == "home"
    assert site.counter.timeout_seconds == 5

  def test_counter_disabled(self) -> None:
    """Test that a disabled counter is omitted."""
    config = load(
      """
sites:
  - domain: example.com
    owner: Test Owner
    email: test@example.com
    counter:
      enabled: false
"""
    )

    assert config.sites[0].counter is None

  def test_counter_settings(self) -> None:
    """Test all counter keys are read."""
    config = load(
      """
sites:
  - domain: example.com
    owner: Test Owner
    email: test@example.com
    counter:
      table_name: example-visits
      counter_key: home
      timeout_seconds: 2
"""
    )

    assert config.sites[0].counter == CounterConfig(
      table_name="example-visits",
      counter_key="home",
      timeout_seconds=2,
    )

  def test_load_multiple_sites(self) -> None:
    """Test loading multiple sites."""
    config = load(
      """
sites:
  - domain: site1.com
    owner: Owner One
    email: one@example.com

  - domain: site2.com
    owner: Owner Two
    email: two@example.com
    deploy_initial_content: false
"""
    )

    assert [site.domain for site in config.sites] == ["site1.com", "site2.com"]
    assert config.sites[1].deploy_initial_content is False

  def test_removal_policy_conversion(self) -> None:
    """Test removal policy string conversion."""
    config = load(
      """
sites:
  - domain: example.com
    owner: Test Owner
    email: test@example.com
    removal_policy: destroy
"""
    )

    assert config.sites[0].removal_policy == RemovalPolicy.DESTROY

  def test_hosted_zone_id(self) -> None:
    """Test hosted zone ID is loaded correctly."""
    config = load(
      """
sites:
  - domain: example.com
    owner: Test Owner
    email: test@example.com
    hosted_zone_id: Z1234567890
"""
    )

    assert config.sites[0].hosted_zone_id == "Z1234567890"

  def test_empty_file(self) -> None:
    """Test an empty file yields no sites."""
    assert load("").sites == []
