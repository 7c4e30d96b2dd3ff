"""Simple entrypoint to probe the Mazzura backend from a terminal."""

from client_app.app import MazzuraClientApp


def main() -> None:
    app = MazzuraClientApp()
    app.start()
    view = app.view()
    print(view.status)
    for card in view.challenges:
        print(f"- {card.title} ({card.badge}): {card.prompt}")
    if view.challenges_empty_text:
        print(view.challenges_empty_text)


if __name__ == "__main__":
    main()
