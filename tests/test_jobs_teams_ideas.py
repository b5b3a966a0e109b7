"""
Job board, teams and idea marketplace
"""
from app.models import GptIdea
from tests.conftest import auth_headers, make_profile

JOB = {
    "position": "Backend Engineer",
    "overview": "Build APIs",
    "responsibilities": "Own services",
    "qualifications": "Python",
    "benefits": "Remote",
    "skills": "python,sql",
    "companyName": "wemake",
    "companyLogoUrl": "https://example.com/logo.png",
    "companyLocation": "Seoul",
    "applyUrl": "https://example.com/apply",
    "jobType": "full-time",
    "jobLocation": "remote",
    "salaryRange": "$70,000 - $100,000",
}


async def test_post_and_filter_jobs(client, author):
    headers = auth_headers(author.profile_id)
    created = await client.post("/api/jobs", json=JOB, headers=headers)
    assert created.status_code == 200
    job_id = created.json()["data"]["id"]
    await client.post("/api/jobs", json={**JOB, "position": "Designer", "jobType": "freelance"}, headers=headers)

    everything = await client.get("/api/jobs")
    assert [j["position"] for j in everything.json()["data"]] == ["Designer", "Backend Engineer"]

    full_time = await client.get("/api/jobs", params={"type": "full-time", "location": "remote"})
    assert [j["id"] for j in full_time.json()["data"]] == [job_id]

    detail = await client.get(f"/api/jobs/{job_id}")
    data = detail.json()["data"]
    assert data["skills"] == "python,sql"
    assert data["applyUrl"] == "https://example.com/apply"


async def test_job_validation(client, author):
    response = await client.post(
        "/api/jobs",
        json={**JOB, "salaryRange": "a lot", "applyUrl": "not a url"},
        headers=auth_headers(author.profile_id),
    )

    assert response.status_code == 422
    fields = {error["loc"][-1] for error in response.json()["detail"]}
    assert fields == {"salaryRange", "applyUrl"}


async def test_unknown_job(client):
    assert (await client.get("/api/jobs/77")).status_code == 404
    assert (await client.get("/api/jobs/seventy")).status_code == 400


async def test_create_team(client, author):
    response = await client.post(
        "/api/teams",
        json={
            "name": "wemake",
            "stage": "mvp",
            "size": 3,
            "equity": 20,
            "roles": "designer,marketer",
            "description": "Community for makers",
        },
        headers=auth_headers(author.profile_id),
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["leader"]["username"] == "nico"
    assert data["teamSize"] == 3

    listed = await client.get("/api/teams")
    assert [t["productName"] for t in listed.json()["data"]] == ["wemake"]
    assert "teamSize" not in listed.json()["data"][0]


async def test_team_constraints(client, author):
    response = await client.post(
        "/api/teams",
        json={
            "name": "x" * 21,
            "stage": "launched",
            "size": 0,
            "equity": 101,
            "roles": "dev",
            "description": "y" * 201,
        },
        headers=auth_headers(author.profile_id),
    )

    assert response.status_code == 422
    fields = {error["loc"][-1] for error in response.json()["detail"]}
    assert fields == {"name", "stage", "size", "equity", "description"}


async def test_idea_views_and_claim(client, db, author):
    idea = GptIdea(idea="A marketplace for rubber ducks")
    db.add(idea)
    await db.commit()

    await client.get(f"/api/ideas/{idea.gpt_idea_id}")
    viewed = await client.get(f"/api/ideas/{idea.gpt_idea_id}")
    assert viewed.json()["data"]["views"] == 2
    assert viewed.json()["data"]["isClaimed"] is False

    claimed = await client.post(f"/api/ideas/{idea.gpt_idea_id}/claim", headers=auth_headers(author.profile_id))
    assert claimed.status_code == 200
    assert claimed.json()["data"]["isClaimed"] is True
    assert claimed.json()["data"]["views"] == 2

    lynn = await make_profile(db, "lynn")
    again = await client.post(f"/api/ideas/{idea.gpt_idea_id}/claim", headers=auth_headers(lynn.profile_id))
    assert again.status_code == 409


async def test_claim_unknown_idea(client, author):
    response = await client.post("/api/ideas/404/claim", headers=auth_headers(author.profile_id))

    assert response.status_code == 404


async def test_ideas_newest_first(client, db):
    db.add_all([GptIdea(idea="first"), GptIdea(idea="second")])
    await db.commit()

    response = await client.get("/api/ideas")

    assert [i["idea"] for i in response.json()["data"]] == ["second", "first"]
