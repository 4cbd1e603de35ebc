# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Unit tests for the registry module.
"""
import pytest
from allowgate.errors import ParseError
from allowgate.REGISTRY.image_reference import ImageReference, RepositoryContext

DIGEST = "sha256:" + "a" * 64


class TestImageReference:
    """Tests for ImageReference parsing."""

    def test_parse_simple_name(self):
        """Test parsing a simple image name."""
        ref = ImageReference.parse("nginx")
        assert ref.registry == "index.docker.io"
        assert ref.repository == "library/nginx"
        assert ref.tag == "latest"

    def test_parse_with_tag(self):
        """Test parsing image with tag."""
        ref = ImageReference.parse("nginx:1.21")
        assert ref.registry == "index.docker.io"
        assert ref.repository == "library/nginx"
        assert ref.tag == "1.21"

    def test_parse_user_image(self):
        """Test parsing user/image format."""
        ref = ImageReference.parse("myuser/myimage:v1")
        assert ref.registry == "index.docker.io"
        assert ref.repository == "myuser/myimage"
        assert ref.tag == "v1"

    def test_parse_full_reference(self):
        """Test parsing full registry reference."""
        ref = ImageReference.parse("gcr.io/project/image:latest")
        assert ref.registry == "gcr.io"
        assert ref.repository == "project/image"
        assert ref.tag == "latest"

    def test_parse_with_digest(self):
        """Test parsing image with digest."""
        ref = ImageReference.parse(f"nginx@{DIGEST}")
        assert ref.registry == "index.docker.io"
        assert ref.repository == "library/nginx"
        assert ref.digest == DIGEST
        assert ref.tag is None

    def test_parse_tag_and_digest(self):
        ref = ImageReference.parse(f"gcr.io/project/image:v2@{DIGEST}")
        assert ref.repository == "project/image"
        assert ref.tag == "v2"
        assert ref.digest == DIGEST

    def test_parse_localhost_registry(self):
        """Test parsing localhost registry."""
        ref = ImageReference.parse("localhost:5000/myimage:v1")
        assert ref.registry == "localhost:5000"
        assert ref.repository == "myimage"
        assert ref.tag == "v1"

    def test_parse_port_without_tag(self):
        ref = ImageReference.parse("registry.local:5000/team/app")
        assert ref.registry == "registry.local:5000"
        assert ref.repository == "team/app"
        assert ref.tag == "latest"

    def test_localhost_without_port_is_a_repository(self):
        """Only a first component with '.' or ':' names a registry."""
        ref = ImageReference.parse("localhost/foo")
        assert ref.registry == "index.docker.io"
        assert ref.repository == "localhost/foo"

    @pytest.mark.parametrize("tag", ["-rc1", ".hidden", "_x", "v1.0-beta_2"])
    def test_tag_may_start_with_any_tag_character(self, tag):
        ref = ImageReference.parse(f"gcr.io/project/image:{tag}")
        assert ref.tag == tag

    def test_tag_length_limit(self):
        assert ImageReference.parse("nginx:" + "a" * 128).tag == "a" * 128
        with pytest.raises(ParseError):
            ImageReference.parse("nginx:" + "a" * 129)

    @pytest.mark.parametrize("reference", [
        "nginx\n",
        "gcr.io/p/i:v1\n",
        "gcr.io/p/i\n",
        "gcr.io\n/p/i",
        "gcr.io/kritis-project/kritis-server:v1\n",
    ])
    def test_trailing_newline_raises(self, reference):
        with pytest.raises(ParseError):
            ImageReference.parse(reference)

    def test_docker_io_is_default_registry(self):
        """docker.io and an omitted registry are the same place."""
        assert ImageReference.parse("docker.io/nginx").context == ImageReference.parse("nginx").context
        assert ImageReference.parse("docker.io/library/nginx").registry == "index.docker.io"

    def test_context(self):
        ref = ImageReference.parse("gcr.io/project/image:v1")
        assert ref.context == RepositoryContext(registry="gcr.io", repository="project/image")
        assert str(ref.context) == "gcr.io/project/image"

    def test_full_name(self):
        """Test full_name property."""
        ref = ImageReference.parse("nginx:1.21")
        assert ref.full_name == "index.docker.io/library/nginx:1.21"

    def test_short_name(self):
        """Test short_name property."""
        ref = ImageReference.parse("nginx:1.21")
        assert ref.short_name == "nginx:1.21"

        ref2 = ImageReference.parse("myuser/myimage:v1")
        assert ref2.short_name == "myuser/myimage:v1"

    def test_empty_reference_raises(self):
        """Test that empty reference raises error."""
        with pytest.raises(ParseError):
            ImageReference.parse("")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            ImageReference.parse("")

    @pytest.mark.parametrize("reference", [
        "Nginx",
        "gcr.io/Project/image",
        "gcr.io/project/image:",
        "gcr.io/",
        "/image",
        "gcr.io//image",
        "image name",
        "nginx@sha256:abc123",
        "nginx@md5:" + "a" * 32,
        "nginx@" + "a" * 64,
        "bad_host.io:port/image",
        "gcr.io/project/" + "a" * 256,
    ])
    def test_invalid_references_raise(self, reference):
        with pytest.raises(ParseError) as excinfo:
            ImageReference.parse(reference)
        assert excinfo.value.reference == reference

    def test_str_representation(self):
        """Test string representation."""
        ref = ImageReference.parse("nginx:1.21")
        assert str(ref) == "nginx:1.21"
