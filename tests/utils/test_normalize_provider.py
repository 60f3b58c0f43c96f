from vaccine_appointment_finder.utils.normalize import normalize_provider


def test_normalize_provider():
    assert normalize_provider(" Clinic A ") == "clinic a"
    assert normalize_provider("CVS") == "cvs"
    assert normalize_provider("rite_aid") == "rite_aid"

    # Interior whitespace is significant
    assert normalize_provider("clinic  a") != normalize_provider("clinic a")


def test_normalize_provider_empty():
    assert normalize_provider(None) == ""
    assert normalize_provider("") == ""
    assert normalize_provider("   ") == ""
