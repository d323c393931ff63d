import random
import re

from runtime.agents.test_data_generator import (
    FAKE_DOCTORS,
    FAKE_NAMES,
    FAKE_REASONS,
    FAKE_TIMES,
    fake_phone,
    generate_test_records,
)

PHONE_RE = re.compile(r"04\d{8}")


def test_generates_ten_records_by_default():
    assert len(generate_test_records()) == 10


def test_records_are_appointment_requests_from_candidate_sets():
    for record in generate_test_records(rng=random.Random(7)):
        data = record.parsedData
        assert data["intent"] == "appointment_request"
        assert data["name"] in FAKE_NAMES
        assert data["doctor"] in FAKE_DOCTORS
        assert data["reason"] in FAKE_REASONS
        assert data["preferred_time"] in FAKE_TIMES
        assert PHONE_RE.fullmatch(data["phone"])


def test_original_message_follows_template():
    record = generate_test_records(count=1, rng=random.Random(3))[0]
    data = record.parsedData
    assert record.originalMessage == (
        f"Hi, I’m {data['name']}. I’d like to see {data['doctor']} "
        f"for {data['reason']} at {data['preferred_time']}."
    )


def test_count_is_configurable():
    assert len(generate_test_records(count=3)) == 3
    assert generate_test_records(count=0) == []


def test_fake_phone_format():
    rng = random.Random(11)
    for _ in range(50):
        phone = fake_phone(rng)
        assert PHONE_RE.fullmatch(phone)
        assert phone[2] != "0"


def test_seeded_generators_repeat_choices():
    first = [r.parsedData for r in generate_test_records(rng=random.Random(5))]
    second = [r.parsedData for r in generate_test_records(rng=random.Random(5))]
    assert first == second
