import pytest

from gaia_board.actions import ResearchAction
from gaia_board.core.enums import FederationTile, Player, ResearchField, Resource
from gaia_board.core.exceptions import (
    InsufficientResourcesError, InvalidPhaseError, ResearchTrackCappedError, ResearchTrackOccupiedError
)

P1 = Player.PLAYER1
P2 = Player.PLAYER2


@pytest.fixture
def scholar(started_game):
    """p1 with knowledge for several steps."""
    started_game.player(P1).resources[Resource.KNOWLEDGE] = 20
    return started_game


class TestResearch:
    def test_navigation_grants_one_qic(self, scholar):
        player = scholar.player(P1)
        qic = player.resource(Resource.QIC)

        scholar.apply(ResearchAction(P1, ResearchField.NAVIGATION))

        assert player.research_level(ResearchField.NAVIGATION) == 1
        assert player.resource(Resource.QIC) == qic + 1
        assert player.resource(Resource.KNOWLEDGE) == 16
        assert player.navigation_range == 1

    def test_navigation_range_grows(self, scholar):
        player = scholar.player(P1)
        for _ in range(2):
            scholar.apply(ResearchAction(P1, ResearchField.NAVIGATION))
        assert player.navigation_range == 2

    def test_intelligence_rewards(self, scholar):
        player = scholar.player(P1)
        player.research[ResearchField.INTELLIGENCE] = 2
        scholar.apply(ResearchAction(P1, ResearchField.INTELLIGENCE))
        assert player.resource(Resource.QIC) == 3

    def test_not_enough_knowledge(self, started_game):
        with pytest.raises(InsufficientResourcesError):
            started_game.apply(ResearchAction(P1, ResearchField.ECONOMY))
        assert started_game.player(P1).research_level(ResearchField.ECONOMY) == 0

    def test_main_phase_only(self, game):
        with pytest.raises(InvalidPhaseError):
            game.apply(ResearchAction(P1, ResearchField.ECONOMY))


class TestLastLevel:
    def test_needs_green_federation(self, scholar):
        player = scholar.player(P1)
        player.research[ResearchField.TERRAFORMING] = 4
        resources = dict(player.resources)
        research = dict(player.research)

        with pytest.raises(ResearchTrackCappedError):
            scholar.apply(ResearchAction(P1, ResearchField.TERRAFORMING))

        assert player.resources == resources
        assert player.research == research

    def test_spends_green_federation(self, scholar):
        player = scholar.player(P1)
        player.research[ResearchField.SCIENCE] = 4
        token = player.add_federation(FederationTile.FED3)

        scholar.apply(ResearchAction(P1, ResearchField.SCIENCE))

        assert player.research_level(ResearchField.SCIENCE) == 5
        assert not token.green
        assert not player.has_green_federation()
        assert player.resource(Resource.KNOWLEDGE) == 25
        assert scholar.research_leader(ResearchField.SCIENCE) == P1

    def test_only_one_player_on_top(self, scholar):
        scholar.player(P2).research[ResearchField.TERRAFORMING] = 5
        player = scholar.player(P1)
        player.research[ResearchField.TERRAFORMING] = 4
        player.add_federation(FederationTile.FED1)

        with pytest.raises(ResearchTrackOccupiedError):
            scholar.apply(ResearchAction(P1, ResearchField.TERRAFORMING))
        assert player.has_green_federation()

    def test_track_maxed(self, scholar):
        scholar.player(P1).research[ResearchField.ECONOMY] = 5
        assert not scholar.can_apply(ResearchAction(P1, ResearchField.ECONOMY))
        with pytest.raises(ResearchTrackCappedError):
            scholar.apply(ResearchAction(P1, ResearchField.ECONOMY))
