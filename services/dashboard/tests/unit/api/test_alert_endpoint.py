"""Unit tests for POST /alert."""

from botocore.exceptions import ClientError
from fastapi import status


class TestAlertEndpoint:
    def test_sends_alert(self, test_client, sns_client):
        response = test_client.post("/alert", json={"message": "test"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True}
        sns_client.publish.assert_called_once_with(
            TopicArn="arn:aws:sns:us-east-1:123456789012:ec2-alerts",
            Message="test",
            Subject="Manual EC2 Alert",
        )

    def test_empty_message_rejected(self, test_client, sns_client):
        response = test_client.post("/alert", json={"message": ""})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Message required"}
        sns_client.publish.assert_not_called()

    def test_whitespace_message_rejected(self, test_client, sns_client):
        response = test_client.post("/alert", json={"message": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        sns_client.publish.assert_not_called()

    def test_missing_message_rejected(self, test_client, sns_client):
        response = test_client.post("/alert", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        sns_client.publish.assert_not_called()

    def test_missing_body_rejected(self, test_client, sns_client):
        response = test_client.post("/alert")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        sns_client.publish.assert_not_called()

    def test_publish_failure_returns_500(self, test_client, sns_client):
        sns_client.publish.side_effect = ClientError(
            {"Error": {"Code": "NotFound", "Message": "Topic does not exist"}},
            "Publish",
        )

        response = test_client.post("/alert", json={"message": "test"})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Failed to send alert"}

    def test_non_string_message_rejected(self, test_client, sns_client):
        response = test_client.post("/alert", json={"message": 123})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Message required"}
        sns_client.publish.assert_not_called()
