from refinder.messaging.postgres_channel import PostgresMessageChannel


class TestPostgresMessageChannel:
    def test_receive_claims_oldest_pending_message(self, clean_tables: None) -> None:
        channel = PostgresMessageChannel()
        first = channel.post({"message": "GET_SAVED_PATTERN"})
        channel.post({"message": "FIND_ON_PAGE", "data": {"term": "x"}})

        message = channel.receive()

        assert message is not None
        assert message.id == first
        assert message.payload == {"message": "GET_SAVED_PATTERN"}
        record = channel.find_by_id(first)
        assert record is not None
        assert record.status == "processing"
        assert record.locked_at is not None

    def test_claimed_message_is_not_received_again(self, clean_tables: None) -> None:
        channel = PostgresMessageChannel()
        channel.post({"message": "GET_SAVED_PATTERN"})

        assert channel.receive() is not None
        assert channel.receive() is None

    def test_reply_marks_done(self, clean_tables: None) -> None:
        channel = PostgresMessageChannel()
        message_id = channel.post({"message": "GET_SAVED_PATTERN"})
        channel.receive()

        channel.reply(message_id, {"message": "SAVED_PATTERN", "data": {"pattern": None}})

        record = channel.find_by_id(message_id)
        assert record is not None
        assert record.status == "done"
        assert record.response_payload == {"message": "SAVED_PATTERN", "data": {"pattern": None}}

    def test_fail_marks_failed(self, clean_tables: None) -> None:
        channel = PostgresMessageChannel()
        message_id = channel.post({"message": "NOPE"})
        channel.receive()

        channel.fail(message_id, "Invalid request payload")

        record = channel.find_by_id(message_id)
        assert record is not None
        assert record.status == "failed"
        assert record.error_message == "Invalid request payload"

    def test_find_by_id_missing(self, clean_tables: None) -> None:
        assert PostgresMessageChannel().find_by_id(999_999) is None
