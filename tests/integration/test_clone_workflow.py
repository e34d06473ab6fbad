"""End-to-end cloning workflow through the lab session."""

from prototypelab import ActionStatus


def test_mass_clone_remove_clear_scenario(session):
    """Hero → 10 clones → remove position 5 → clear clones."""
    original = session.original
    session.mass_clone(10)
    assert len(session.roster) == 11

    before = session.roster.get_all()
    summaries = [p.summary() for p in before]

    result = session.remove(5)

    assert result.ok
    after = session.roster.get_all()
    assert len(after) == 10
    assert after == before[:5] + before[6:]
    assert [p.summary() for p in after] == summaries[:5] + summaries[6:]

    session.clear_clones()

    assert session.roster.get_all() == (original,)
    assert original.summary() == "Hero | HP:100 | XP:0 | Lvl:1"


def test_clones_evolve_independently(session):
    session.mass_clone(3)

    session.damage(1)
    for _ in range(5):
        session.gain_experience(2)
    session.level_up(3)
    session.rename(3, "Champion")

    assert session.render() == [
        "00 - Hero | HP:100 | XP:0 | Lvl:1",
        "01 - Hero (clone) | HP:90 | XP:0 | Lvl:1",
        "02 - Hero (clone) | HP:120 | XP:50 | Lvl:3",
        "03 - Champion | HP:110 | XP:0 | Lvl:2",
    ]


def test_original_protected_throughout(session):
    session.mass_clone(2)

    for _ in range(3):
        assert session.remove(0).status is ActionStatus.REJECTED

    session.clear_clones()
    assert session.remove(1).status is ActionStatus.IGNORED
    assert len(session.roster) == 1
