import json

import pytest

from shellpipe import Job, JobStatus


def test_new_job_has_unset_identifiers():
    job = Job.from_line("ls -l | wc")
    assert job.job_id is None
    assert job.status is JobStatus.RUNNING
    assert [proc.index for proc in job.processes] == [0, 1]
    assert all(proc.pid is None and proc.pgid is None for proc in job.processes)
    assert not any(proc.stopped or proc.completed for proc in job.processes)


def test_assign_job_id_propagates_to_every_stage():
    job = Job.from_line("cat f | sort | uniq")
    job.assign_job_id(4242)
    assert job.job_id == 4242
    assert [proc.pgid for proc in job.processes] == [4242, 4242, 4242]


def test_set_status_accepts_enum_string_and_none():
    job = Job.from_line("sleep 10 &")
    job.set_status("Stopped")
    assert job.status is JobStatus.STOPPED
    job.set_status(None)
    assert job.status is JobStatus.STOPPED
    job.set_status(JobStatus.RUNNING)
    assert job.status is JobStatus.RUNNING
    with pytest.raises(ValueError):
        job.set_status("Zombie")


def test_stopped_and_completed_track_all_processes():
    job = Job.from_line("a | b")
    assert not job.is_stopped()
    job.processes[0].completed = True
    job.processes[1].stopped = True
    assert job.is_stopped()
    assert not job.is_completed()
    job.processes[1].completed = True
    assert job.is_completed()


def test_counts_and_foreground_come_from_request():
    job = Job.from_line("a | b | c &")
    assert job.num_processes == 3
    assert job.num_pipes == 2
    assert job.foreground is False


def test_render_lists_each_stage():
    job = Job.from_line("ls -l | wc")
    job.processes[0].pid = 100
    job.assign_job_id(100)
    assert job.render() == (
        "JID = 100, In foreground? 1\n"
        "Process 0 (PID/PGID = 100/100) argv: ls -l \n"
        "Process 1 (PID/PGID = -1/100) argv: wc "
    )
    assert str(job) == job.render()


def test_render_without_stages():
    assert Job.from_line("").render() == "JID = -1, In foreground? 1\n"


def test_copy_takes_job_id_and_status_only():
    job = Job.from_line("cat f | wc")
    job.assign_job_id(7)
    job.set_status(JobStatus.STOPPED)
    job.processes[0].pid = 8
    clone = job.copy()
    assert clone.request == job.request
    assert clone.job_id == 7
    assert clone.status is JobStatus.STOPPED
    assert [proc.pgid for proc in clone.processes] == [None, None]
    assert clone.processes[0].pid is None


def test_reparse_keeps_identifiers_and_resets_processes():
    job = Job.from_line("ls")
    job.assign_job_id(11)
    job.reparse("echo a | wc")
    assert job.job_id == 11
    assert job.num_processes == 2
    assert [proc.pgid for proc in job.processes] == [None, None]


def test_to_dict_is_json_ready():
    job = Job.from_line("sort < in.txt > out.txt &")
    job.assign_job_id(3)
    data = json.loads(json.dumps(job.to_dict()))
    assert data["job_id"] == 3
    assert data["status"] == "Running"
    assert data["foreground"] is False
    assert data["stages"] == [
        {
            "arguments": ["sort"],
            "has_pipe_to_next": False,
            "pid": None,
            "pgid": 3,
            "stopped": False,
            "completed": False,
        }
    ]
    assert data["stdin"] == {"target": "in.txt", "mode": None, "default": False}
    assert data["stdout"] == {"target": "out.txt", "mode": "truncate", "default": False}
    assert data["stderr"] == {"target": "STDERR_FILENO", "mode": None, "default": True}
