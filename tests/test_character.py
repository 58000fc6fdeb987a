from questkit.character import CustomCharacter


def test_defaults():
    character = CustomCharacter()
    assert character.max_hp == 100
    assert character.hp == character.max_hp
    assert character.dead is False
    assert character.forced is False


def test_take_damage_returns_damage_and_lowers_hp():
    character = CustomCharacter()
    before = character.hp
    dealt = character.take_damage(30)
    assert dealt == 30
    assert before - character.hp == 30
    assert character.dead is False


def test_character_stays_alive_above_zero():
    character = CustomCharacter()
    dealt = character.take_damage(10)
    assert dealt == 10
    assert character.hp == 90
    assert character.dead is False


def test_damage_to_exactly_zero_marks_dead():
    character = CustomCharacter(hp=20.0)
    character.take_damage(20)
    assert character.hp == 0
    assert character.dead is True


def test_overkill_marks_dead():
    character = CustomCharacter(hp=5.0)
    character.take_damage(50)
    assert character.dead is True
    assert character.hp == -45


def test_repeated_damage_accumulates():
    character = CustomCharacter(hp=25.0)
    character.take_damage(10)
    character.take_damage(10)
    assert character.hp == 5
    assert character.dead is False
    character.take_damage(10)
    assert character.hp == -5
    assert character.dead is True