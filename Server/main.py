"""
Trivia Board Server - Main Entry Point

This is the main entry point for the trivia board server.
It initializes the game service and starts the Flask-SocketIO application.
"""

from trivia_board import create_app
from trivia_board.config import Config, validate_board_settings
from trivia_board.services.game_service import initialize_game_service
from trivia_board.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    game_service = None
    try:
        print("Initializing services...")

        validate_board_settings(
            Config.CATEGORY_COUNT,
            Config.CLUES_PER_CATEGORY,
            Config.MAX_ACQUISITION_ATTEMPTS,
            Config.CATALOG_CANDIDATE_COUNT,
        )
        print("✓ Board settings validated")

        game_service = initialize_game_service()
        if game_service:
            print("✓ Game service initialized successfully")
        else:
            print("✗ Failed to initialize game service")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info(
            f"Trivia Board Server starting - catalog {Config.CATALOG_BASE_URL}, "
            f"{Config.CATEGORY_COUNT}x{Config.CLUES_PER_CATEGORY} boards"
        )

        print(f"\nStarting Trivia Board Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Catalog: {Config.CATALOG_BASE_URL}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Trivia Board Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise
    finally:
        if game_service:
            game_service.close()


if __name__ == '__main__':
    main()
