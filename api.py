from __future__ import annotations

import threading

from fastapi import FastAPI, HTTPException

from visualizer.model import LoadProjectResult, ProjectConfig
from visualizer.project import Project
from visualizer.summarize import load_and_summarize


app = FastAPI(title="DataMapper Model Visualizer")

# Sync endpoints run in a threadpool; sys.path and the model registry are
# process-wide, so only one project loads at a time.
load_lock = threading.Lock()


@app.post("/load", response_model=LoadProjectResult)
def load(config: ProjectConfig) -> LoadProjectResult:
	project = Project(config)
	with load_lock:
		try:
			return load_and_summarize(project)
		except Exception as e:
			raise HTTPException(status_code=400, detail=f"Failed to load project: {e}") from e


def create_app() -> FastAPI:
	return app
