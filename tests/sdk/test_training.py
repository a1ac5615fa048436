"""Tests for SDK training info function."""

import pytest

from xert_mcp.sdk import training
from tests.conftest import make_response


class TestGetTrainingInfo:
    def test_returns_training_info(self, xert_client, mock_transport, training_info_payload):
        mock_transport.return_value = make_response(200, training_info_payload)

        info = training.get_training_info(xert_client)

        assert info.signature.ftp == 265.4
        call = mock_transport.call_args
        assert call.args[1] == "https://www.xertonline.com/oauth/training_info"
        assert call.kwargs["params"] == {}

    def test_format_param(self, xert_client, mock_transport, training_info_payload):
        mock_transport.return_value = make_response(200, training_info_payload)

        training.get_training_info(xert_client, format="ERG")

        assert mock_transport.call_args.kwargs["params"] == {"format": "erg"}

    def test_invalid_format_sends_nothing(self, xert_client, mock_transport):
        with pytest.raises(ValueError):
            training.get_training_info(xert_client, format="fit")
        mock_transport.assert_not_called()
