"""Pure rendering of state into the view model."""

from __future__ import annotations

import json
from dataclasses import replace

from memory.ui_state import AppState, LoadingFlags
from models.challenge import Challenge
from models.drafts import ItemDraft
from models.outfit import GeneratedOutfit, OutfitPiece
from models.wardrobe_item import WardrobeRecord
from ui.view import APP_TITLE, CHALLENGES_EMPTY, WARDROBE_EMPTY, outfit_line, render


def test_initial_render_shows_placeholders() -> None:
    view = render(AppState())

    assert view.title == APP_TITLE
    assert view.status == "Checking backend..."
    assert view.challenges_empty_text == CHALLENGES_EMPTY
    assert view.wardrobe_empty_text == WARDROBE_EMPTY
    assert view.outfit is None
    assert view.profile_json is None
    assert view.save_profile.label == "Save Profile"
    assert view.weather_options[0] == ""
    assert view.category_options == ["top", "bottom", "outerwear", "footwear", "accessory"]


def test_render_is_pure() -> None:
    state = AppState(session_email="a@x.com")
    assert render(state) == render(state)
    assert state.notifications == ()


def test_challenge_badges() -> None:
    state = AppState(challenges=(Challenge(title="Thrift Flip", prompt="Restyle", reward_points=80),))

    view = render(state)

    assert view.challenges_empty_text is None
    assert view.challenges[0].badge == "+80"


def test_outfit_lines_skip_empty_parts() -> None:
    assert outfit_line(OutfitPiece(category="top", name="Tee", color="black", brand="Local")) == (
        "top: Tee · black · Local"
    )
    assert outfit_line(OutfitPiece(category="bottom", name="Jeans", color="", brand=None)) == "bottom: Jeans"

    outfit = GeneratedOutfit(title="Brunch", items=[OutfitPiece(category="top", name="Tee", brand="Local")])
    view = render(AppState(generated_outfit=outfit))
    assert view.outfit.title == "Brunch"
    assert view.outfit.lines == ["top: Tee · Local"]


def test_wardrobe_cards_use_placeholders() -> None:
    items = (
        WardrobeRecord(id="w-1", owner_email="a@x.com", name="Tee", category="top", brand="Local", size="M"),
        WardrobeRecord(owner_email="a@x.com", name="Boots", category="footwear", image_url="https://img/boots.jpg"),
    )

    view = render(AppState(wardrobe_list=items))

    assert view.wardrobe_empty_text is None
    assert view.wardrobe[0].key == "w-1"
    assert view.wardrobe[0].subtitle == "Local · — · M"
    assert view.wardrobe[0].image_url is None
    assert view.wardrobe[0].thumbnail_label == "top"
    assert view.wardrobe[1].key == "item-1"
    assert view.wardrobe[1].subtitle == "— · — · —"
    assert view.wardrobe[1].image_url == "https://img/boots.jpg"


def test_profile_is_rendered_as_indented_json() -> None:
    profile = {"name": "Aisha", "preferred_colors": ["black"]}

    view = render(AppState(display_profile=profile))

    assert view.profile_json == json.dumps(profile, indent=2)


def test_owner_email_field_falls_back_to_session_email() -> None:
    state = AppState(session_email="a@x.com")
    assert render(state).owner_email_value == "a@x.com"

    state = replace(state, item_draft=ItemDraft(owner_email="b@x.com"))
    assert render(state).owner_email_value == "b@x.com"


def test_loading_disables_only_its_group() -> None:
    view = render(AppState(loading=LoadingFlags(profile=True)))

    assert view.save_profile.label == "Saving..."
    assert view.save_profile.disabled and view.fetch_profile.disabled
    assert not view.add_item.disabled and not view.view_wardrobe.disabled
    assert not view.generate.disabled


def test_backend_text_is_escaped_in_markup() -> None:
    hostile = "<img src=x onerror=alert(1)>"
    state = AppState(
        status=f"✅ {hostile}",
        challenges=(Challenge(title=hostile, prompt=f"<script>{hostile}</script>", reward_points=5),),
    )

    view = render(state)
    card_html = view.challenges[0].html

    assert "<img" not in card_html
    assert "<script>" not in card_html
    assert "&lt;img src=x onerror=alert(1)&gt;" in card_html
    assert "<img" not in view.status_html
    assert view.status_html.startswith("<p class='status'>")


def test_null_backend_fields_render_with_placeholders() -> None:
    state = AppState(
        challenges=(Challenge.model_validate({"title": None, "prompt": None, "reward_points": None}),),
        wardrobe_list=(WardrobeRecord.model_validate({"id": 7, "name": None, "category": None, "tags": None}),),
        generated_outfit=GeneratedOutfit.model_validate(
            {"title": None, "items": [{"category": None, "name": "Tee", "color": None}]}
        ),
    )

    view = render(state)

    assert view.challenges[0].title == "—"
    assert view.challenges[0].prompt == ""
    assert view.challenges[0].badge == "+0"
    assert view.wardrobe[0].name == "—"
    assert view.wardrobe[0].thumbnail_label == "—"
    assert view.outfit.title == "—"
    assert view.outfit.lines == ["—: Tee"]
