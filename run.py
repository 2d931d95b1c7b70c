from library_api import create_app

app = create_app()

if __name__ == "__main__":
    app.logger.info(f"Server is running on port {app.config['PORT']}")
    app.logger.info(f"API Base URL: {app.config['API_BASE_URL']}")
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config.get("DEBUG", False))
