import csv
import io
import os
import sys

import click
import matplotlib
matplotlib.use('Agg')
import numpy as np
from flask import Flask, Response, jsonify, send_file
from matplotlib import pyplot as plt
from reportlab.lib.pagesizes import letter
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

import methods
from methods import hurwicz
from methods.matrix import InvalidCoefficientError, InvalidMatrixError
from routes import criteria_bp
from routes.criteria_routes import build_all_results, get_coefficient, get_payload
from utils.file_utils import CSVHandler

# Profits of 4 strategies under 5 states of nature
REFERENCE_PROFITS = [
    [15, 10, 0, -6, 17],
    [3, 14, 8, 9, 2],
    [1, 5, 14, 20, -3],
    [7, 19, 10, 2, 0],
]

app = Flask(__name__)
app.config['SECRET_KEY'] = os.urandom(24)
app.config['HURWICZ_COEFFICIENT'] = 0.8
app.config['STRICT_COEFFICIENT'] = False
# e.g. FLASK_HURWICZ_COEFFICIENT=0.5
app.config.from_prefixed_env()

# Register blueprints
app.register_blueprint(criteria_bp, url_prefix='/criteria')


@app.errorhandler(InvalidMatrixError)
@app.errorhandler(InvalidCoefficientError)
def invalid_input(error):
    """Report rejected matrices and coefficients as bad requests."""
    app.logger.warning('Invalid input: %s', error)
    return jsonify({'error': str(error)}), 400


# Routes
@app.route('/')
def index():
    """List the available criteria."""
    return jsonify({
        'criteria': list(methods.CRITERIA),
        'hurwicz_coefficient': app.config['HURWICZ_COEFFICIENT'],
        'strict_coefficient': app.config['STRICT_COEFFICIENT']
    })


@app.route('/export', methods=['POST'])
def export_results():
    """Export the three criteria and the strategy rankings as CSV."""
    payload = get_payload()
    coefficient = get_coefficient(payload)
    results = build_all_results(payload.get('matrix'), coefficient)

    output = io.StringIO()
    writer = csv.writer(output)

    writer.writerow(['Criterion', 'Value', 'Strategy'])
    for label, result in zip(methods.CRITERIA, results):
        writer.writerow([label, result['value'], result['strategy']])
    writer.writerow([])

    writer.writerow(['Criterion', 'Rank', 'Strategy', 'Score'])
    for label, result in zip(methods.CRITERIA, results):
        for entry in result['ranking']:
            writer.writerow([label, entry['rank'], entry['strategy'], entry['score']])

    output.seek(0)
    return Response(
        output.getvalue(),
        mimetype='text/csv',
        headers={
            'Content-Disposition': 'attachment; filename=criteria_results.csv'
        }
    )


@app.route('/export-pdf', methods=['POST'])
def export_results_pdf():
    """Export the criteria as a PDF with a chart of the strategy scores."""
    payload = get_payload()
    coefficient = get_coefficient(payload)
    results = build_all_results(payload.get('matrix'), coefficient)

    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    width, height = letter

    c.setFont("Helvetica-Bold", 16)
    c.drawString(100, height - 50, "Decision Criteria Report")

    c.setFont("Helvetica", 12)
    c.drawString(100, height - 80, f"Hurwicz coefficient: {coefficient:g}")

    # Per-strategy scores, one bar group per strategy
    n_strategies = len(results[0]['scores'])
    positions = np.arange(n_strategies)
    bar_width = 0.25
    fig, ax = plt.subplots()
    for offset, (label, result) in enumerate(zip(methods.CRITERIA, results)):
        ax.bar(positions + offset * bar_width, result['scores'], bar_width, label=label)
    ax.set_xticks(positions + bar_width)
    ax.set_xticklabels([f"S{i + 1}" for i in range(n_strategies)])
    ax.set_title('Strategy Scores')
    ax.set_xlabel('Strategies')
    ax.set_ylabel('Scores')
    ax.legend()

    chart = io.BytesIO()
    fig.savefig(chart, format='png')
    plt.close(fig)
    chart.seek(0)
    c.drawImage(ImageReader(chart), 100, height - 350, width=400, height=250)

    summary_y_position = height - 380
    c.setFont("Helvetica-Bold", 14)
    c.drawString(100, summary_y_position, "Summary:")
    c.setFont("Helvetica", 12)
    for i, (label, result) in enumerate(zip(methods.CRITERIA, results), 1):
        c.drawString(
            120, summary_y_position - 20 * i,
            f"{label}: {result['value']:g} (strategy S{result['strategy'] + 1})"
        )

    c.save()
    buffer.seek(0)
    return send_file(
        buffer,
        mimetype='application/pdf',
        as_attachment=True,
        download_name='criteria_report.pdf'
    )


@app.cli.command('report')
@click.option('--matrix-file', type=click.Path(exists=True, dir_okay=False),
              help='CSV file with one strategy per line. Defaults to the reference matrix.')
@click.option('--skip-header', is_flag=True, help='Ignore the first line of the matrix file.')
@click.option('--coefficient', type=float, default=None, help='Hurwicz pessimism coefficient.')
@click.option('--output', type=click.Path(dir_okay=False), help='Also write the results to this CSV file.')
def report(matrix_file, skip_header, coefficient, output):
    """Print the Minimax, Savage and Hurwicz values of a profit matrix."""
    if coefficient is None:
        coefficient = app.config['HURWICZ_COEFFICIENT']

    try:
        if matrix_file:
            handler = CSVHandler(os.path.dirname(matrix_file) or '.')
            matrix = handler.read_matrix(os.path.basename(matrix_file), skip_header=skip_header)
        else:
            matrix = REFERENCE_PROFITS

        if app.config['STRICT_COEFFICIENT']:
            coefficient = hurwicz.validate_coefficient(coefficient)
        values = methods.evaluate_all(matrix, coefficient)
    except (InvalidMatrixError, InvalidCoefficientError) as exc:
        click.echo(f"Invalid input: {exc}", err=True)
        sys.exit(1)

    for label, value in values.items():
        click.echo(f"{label}: {value:g}")

    if output:
        results = build_all_results(matrix, coefficient)
        handler = CSVHandler(os.path.dirname(output) or '.')
        handler.write_results(os.path.basename(output), [
            {'criterion': label, 'value': result['value'], 'strategy': result['strategy']}
            for label, result in zip(methods.CRITERIA, results)
        ])


if __name__ == '__main__':
    app.run(debug=True, port=5001)
