# Mazzura — Streamlit front end
# Run with: streamlit run ui/streamlit_app.py

import sys
from pathlib import Path

import streamlit as st

sys.path.append(str(Path(__file__).resolve().parents[1]))

from client_app.app import MazzuraClientApp  # noqa: E402
from ui.view import PLACEHOLDERS, ViewModel, poll_interval, render  # noqa: E402

st.set_page_config(page_title="Mazzura", page_icon="🧵", layout="wide")

STYLES = """
<style>
.status{font-size:14px;opacity:.8;text-align:right}
.tagline{font-size:12px;opacity:.6;margin-top:-12px}
.badge{display:inline-block;padding:2px 8px;border-radius:6px;background:#fef3c7;color:#92400e;font-size:12px}
.card{border:1px solid #0000000f;border-radius:10px;padding:10px 12px;margin-bottom:8px;background:#fff}
.card .meta{font-size:12px;color:#6b7280}
.footer{opacity:.6;font-size:12px;text-align:center}
</style>
"""
st.markdown(STYLES, unsafe_allow_html=True)


# ---------- App state ----------
def get_app() -> MazzuraClientApp:
    if "mazzura" not in st.session_state:
        app = MazzuraClientApp()
        app.start(wait=False)
        st.session_state["mazzura"] = app
    return st.session_state["mazzura"]


app = get_app()
handlers = app.handlers
state = app.store.state

# Store → widget keys. Widgets are created with ``key`` only, so the store stays
# the single source of truth and ``on_change`` writes straight back into it.
BINDINGS = {
    "session_email": state.session_email,
    **{f"profile_{k}": v for k, v in vars(state.profile_draft).items()},
    **{f"item_{k}": v for k, v in vars(state.item_draft).items()},
    **{f"gen_{k}": v for k, v in vars(state.gen_draft).items()},
}
BINDINGS["item_owner_email"] = state.item_draft.owner_email or state.session_email
for widget_key, value in BINDINGS.items():
    st.session_state[widget_key] = value


def _bind_session_email() -> None:
    handlers.set_session_email(st.session_state["session_email"])


def _bind(prefix: str, field_name: str):
    widget_key = f"{prefix}_{field_name}"
    update = {
        "profile": handlers.update_profile_draft,
        "item": handlers.update_item_draft,
        "gen": handlers.update_gen_draft,
    }[prefix]

    def _callback() -> None:
        update(**{field_name: st.session_state[widget_key]})

    return _callback


def text_field(label: str, prefix: str, field_name: str, placeholder_key: str | None = None) -> None:
    st.text_input(
        label,
        key=f"{prefix}_{field_name}",
        on_change=_bind(prefix, field_name),
        placeholder=PLACEHOLDERS.get(placeholder_key or field_name, ""),
    )


def show_notifications() -> None:
    for note in app.store.drain_notifications():
        if note.level == "error":
            st.error(note.message)
        elif note.level == "warning":
            st.warning(note.message)
        else:
            st.toast(note.message)


polling = poll_interval(app.probe_finished())


def stop_polling_when_probed() -> None:
    # run_every is fixed per full run; a full rerun rebuilds the fragments without it.
    if polling and app.probe_finished():
        st.rerun()


@st.fragment(run_every=polling)
def header() -> None:
    view = render(app.store.state)
    left, right = st.columns([3, 2])
    with left:
        st.title(view.title)
        st.markdown(f"<p class='tagline'>{view.tagline}</p>", unsafe_allow_html=True)
    with right:
        st.markdown(view.status_html, unsafe_allow_html=True)
    stop_polling_when_probed()


@st.fragment(run_every=polling)
def challenges() -> None:
    view = render(app.store.state)
    st.caption("Gen-Z community")
    for card in view.challenges:
        st.markdown(card.html, unsafe_allow_html=True)
    if view.challenges_empty_text:
        st.caption(view.challenges_empty_text)
    stop_polling_when_probed()


def email_section(view: ViewModel) -> None:
    st.subheader("Your Email")
    st.text_input("Email", key="session_email", on_change=_bind_session_email, placeholder=PLACEHOLDERS["email"])
    c1, c2 = st.columns(2)
    with c1:
        st.button("Fetch Profile", key="email_fetch_profile", on_click=handlers.fetch_profile)
    with c2:
        st.button("Load Wardrobe", key="email_load_wardrobe", on_click=handlers.list_wardrobe)


def generate_section(view: ViewModel) -> None:
    st.subheader("Generate Outfit")
    st.caption("Mood · Weather · Event")
    c1, c2, c3 = st.columns(3)
    with c1:
        text_field("Mood", "gen", "mood")
    with c2:
        st.selectbox(
            "Weather",
            view.weather_options,
            key="gen_weather",
            on_change=_bind("gen", "weather"),
            format_func=lambda option: option or "Select",
        )
    with c3:
        text_field("Event", "gen", "event")
    st.button(
        view.generate.label,
        key="generate",
        disabled=view.generate.disabled,
        on_click=handlers.generate_outfit,
        use_container_width=True,
    )
    if view.outfit:
        st.markdown(f"**{view.outfit.title}**")
        st.markdown("\n".join(f"- {line}" for line in view.outfit.lines))


def profile_section(view: ViewModel) -> None:
    st.subheader("Build Your Fashion DNA")
    c1, c2 = st.columns(2)
    with c1:
        text_field("Name", "profile", "name")
        text_field("Body Type", "profile", "body_type")
        text_field("Preferred Colors (comma)", "profile", "preferred_colors")
    with c2:
        text_field("Email", "profile", "email")
        text_field("Skin Tone", "profile", "skin_tone")
        text_field("Vibe", "profile", "vibe")
    text_field("Location", "profile", "location")

    b1, b2 = st.columns(2)
    with b1:
        st.button(
            view.save_profile.label,
            key="save_profile",
            disabled=view.save_profile.disabled,
            on_click=handlers.save_profile,
        )
    with b2:
        st.button(
            view.fetch_profile.label,
            key="fetch_profile",
            disabled=view.fetch_profile.disabled,
            on_click=handlers.fetch_profile,
        )
    if view.profile_json is not None:
        st.markdown("**Profile**")
        st.code(view.profile_json, language="json")


def closet_section(view: ViewModel) -> None:
    st.subheader("Smart Closet")
    c1, c2 = st.columns(2)
    with c1:
        text_field("Owner Email", "item", "owner_email", "email")
        st.selectbox("Category", view.category_options, key="item_category", on_change=_bind("item", "category"))
        text_field("Size", "item", "size")
        text_field("Price", "item", "price")
        text_field("Warmth (0-10)", "item", "warmth")
    with c2:
        text_field("Item Name", "item", "name", "item_name")
        text_field("Color", "item", "color")
        text_field("Brand", "item", "brand")
        text_field("Tags (comma)", "item", "tags")
    text_field("Image URL (optional)", "item", "image_url")

    b1, b2 = st.columns(2)
    with b1:
        st.button(view.add_item.label, key="add_item", disabled=view.add_item.disabled, on_click=handlers.add_item)
    with b2:
        st.button(
            view.view_wardrobe.label,
            key="view_wardrobe",
            disabled=view.view_wardrobe.disabled,
            on_click=lambda: handlers.list_wardrobe(app.store.state.item_draft.owner_email or None),
        )

    cols = st.columns(2)
    for idx, card in enumerate(view.wardrobe):
        with cols[idx % 2]:
            with st.container(border=True):
                if card.image_url:
                    st.image(card.image_url, width=48)
                else:
                    st.caption(card.thumbnail_label)
                st.markdown(f"**{card.name}**")
                st.caption(card.subtitle)
    if view.wardrobe_empty_text:
        st.caption(view.wardrobe_empty_text)


# ---------- Layout ----------
view = render(app.store.state)
header()
show_notifications()

top = st.columns(3)
with top[0]:
    email_section(view)
with top[1]:
    st.subheader("AI Challenges")
    challenges()
with top[2]:
    generate_section(view)

bottom = st.columns(2)
with bottom[0]:
    profile_section(view)
with bottom[1]:
    closet_section(view)

st.markdown(f"<p class='footer'>{view.footer}</p>", unsafe_allow_html=True)
